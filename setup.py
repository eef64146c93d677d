#!/usr/bin/env python
# coding: utf-8

import re

from setuptools import setup

# Parse version from the package-level constant
with open('achievements/__init__.py', encoding='utf-8') as init:
    version = re.search(
        r"__version__ = '(.+)'", init.read()).group(1)

# Prepare install requires and extra requires
install_requires = [
    'python_dateutil',
    ]
extras_require = {
    'tests': ['pytest', 'pytest-cov'],
    'dev': ['invoke'],
    }
extras_require['all'] = [
    dependency
    for extra in extras_require.values()
    for dependency in extra]

# Prepare the long description from readme
with open('README.rst', encoding='utf-8') as readme:
    description = readme.read()

setup(
    name='achievements',
    description='achievements - How long has it been since?',
    long_description=description,

    version=version,
    provides=['achievements'],
    packages=['achievements'],
    scripts=['bin/achievements'],
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires='>=3.8',

    license='MIT',

    keywords=['milestones', 'anniversary', 'days', 'elapsed'],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities',
        ],

    data_files=[],
    dependency_links=[],
    package_dir={},
    zip_safe=False,
    )
