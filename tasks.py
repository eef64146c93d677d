#!/usr/bin/env python
# coding: utf-8

""" Development tasks, run them using ``invoke <task>`` """

from invoke import run, task

from achievements.utils import LOG_INFO, log

log.setLevel(LOG_INFO)


@task
def build(ctx):
    '''
    Build Packages
    --------------

    Source distribution only.
    '''
    log.info("Building the source distribution")
    run("python setup.py sdist")


@task
def pytest(ctx, functional=False):
    '''
    Run pytest
    ----------

    Use --functional to run the installed script as well.
    '''
    cmd = "python -m pytest tests"
    if functional:
        cmd += " --functional"
    log.info("Running `{}`".format(cmd))
    run(cmd)


@task
def coverage(ctx, report=True):
    '''
    Run Coverage Test [pytest]
    --------------------------
    '''
    cmd = "python -m pytest --cov=achievements tests"
    if report:
        cmd += " --cov-report=term-missing"
    log.info("Running `{}`".format(cmd))
    run(cmd)
