"""
How long has it been since the things worth remembering?

Report the approximate number of days elapsed since a list of
milestones (like the Moon landing or the fall of the Berlin Wall)
together with a decorative rating growing with the elapsed time.

The `interval`_ module contains the core of the elapsed time
estimation and tiering. Exceptions, config, milestones and time
handling are placed in the `base`_ module. Logging and other generic
utilities can be found in the `utils`_ module. Option parsing and
other command line stuff resides in the `cli`_ module.
"""

__version__ = '0.1.0'
