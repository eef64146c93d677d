# coding: utf-8

"""
Command line interface for achievements

This module takes care of processing command line options and
running the main loop which reports all configured milestones.
"""

import argparse
import sys

import achievements.base
from achievements import utils
from achievements.interval import Interval, estimate
from achievements.utils import log

USAGE = """
achievements [options]

How long has it been since the things worth remembering?

Show the approximate number of days elapsed since each configured
milestone together with a decorative rating.
""".strip()


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Options
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Options(object):
    """ Command line options parser """

    def __init__(self, arguments=None):
        """ Prepare the parser. """
        self.parser = argparse.ArgumentParser(usage=USAGE)
        self._prepare_arguments(arguments)
        self.opt = self.arg = None

        # Enable debugging output (even before options are parsed)
        if "--debug" in self.arguments:
            log.setLevel(utils.LOG_DEBUG)

        # Time selection
        group = self.parser.add_argument_group("Select")
        group.add_argument(
            "--now", metavar="INSTANT",
            help="Report as of given instant instead of the current time, "
                 "e.g. 2024-07-20T20:17:40+00:00")

        # Formating options
        group = self.parser.add_argument_group("Format")
        group.add_argument(
            "--width", type=int,
            help="Maximum width of the report output (default: 79)")
        group.add_argument(
            "--words", action="store_true",
            help="Describe the interval in words as well (e.g. 2 weeks)")

        # Other options
        group = self.parser.add_argument_group("Utils")
        group.add_argument(
            "--config",
            metavar="FILE",
            help="Use alternate configuration file (default: 'config')")
        group.add_argument(
            "--debug", action="store_true",
            help="Turn on debugging output, do not catch exceptions")
        group.add_argument(
            "--test", action="store_true",
            help="Use the built-in example milestones")

    def _prepare_arguments(self, arguments):
        """ Prepare arguments (both direct and from command line) """
        if arguments is not None:
            if isinstance(arguments, str):
                self.arguments = arguments.split()
            else:
                self.arguments = arguments
        else:
            self.arguments = sys.argv[1:]

    def parse(self):
        """ Parse the options. """
        opt, arg = self.parser.parse_known_args(self.arguments)
        self.opt = opt
        self.arg = arg
        self.check()

        if opt.now is not None:
            opt.now = achievements.base.parse_instant(opt.now)

        log.debug("Gathered options:")
        log.debug('options = {0}'.format(opt))
        return opt

    def check(self):
        """ Perform additional check for given options """
        if self.arg:
            raise achievements.base.OptionError(
                "Invalid argument: '{0}'".format(self.arg[0]))
        if self.opt.width is not None and self.opt.width < utils.MIN_WIDTH:
            raise achievements.base.OptionError(
                "Invalid width '{0}', use at least {1}.".format(
                    self.opt.width, utils.MIN_WIDTH))


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Config
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def load_config(options):
    """
    Read the config file selected by options

    Fall back to the built-in example milestones when no config file
    is available or when the smoke test is requested.
    """
    if options.test:
        return achievements.base.Config(achievements.base.DEFAULT_CONFIG)
    try:
        return achievements.base.Config(path=options.config)
    except achievements.base.ConfigFileError as error:
        # An explicitly requested file has to be there
        if options.config is not None:
            raise
        log.info(error)
        log.info("Using built-in milestones, create {0} to track your own:"
                 "\n{1}".format(
                     achievements.base.Config.path(),
                     achievements.base.Config.example().strip()))
        return achievements.base.Config(achievements.base.DEFAULT_CONFIG)


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Main
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def line(milestone, elapsed, marker, words=False, width=utils.MAX_WIDTH):
    """
    Format the report line for given milestone

    Only the label is shortened to fit the width, the day count and
    the markers are always shown in full.
    """
    summary = "{0} {1} {2}".format(
        elapsed.days,
        utils.pluralize("day", elapsed.days),
        elapsed.badges(marker)).rstrip()
    if words:
        summary = "{0} ({1})".format(
            summary, Interval.from_days(elapsed.days).to_words())
    label = utils.shorted(
        milestone.label, max(width - len(": ") - len(summary), 4))
    return "{0}: {1}".format(label, summary)


def main(arguments=None):
    """
    Parse options, estimate elapsed time and show the results

    Takes optional parameter ``arguments`` which can be either
    command line string or list of options. This is very useful
    for testing purposes. Function returns a list of the form::

        [(milestone, estimate), ...]

    with all milestones which have been reported.
    """
    options = Options(arguments).parse()
    config = load_config(options)
    milestones = config.milestones
    width = options.width or config.width
    marker = config.marker

    # Read the clock once, all lines share the same reference point
    now = options.now or achievements.base.now()
    log.debug("Reporting as of {0}".format(now.isoformat()))

    reported = []
    for milestone in milestones:
        try:
            elapsed = estimate(milestone.epoch, now)
        except achievements.base.InvalidInterval as error:
            log.warning("Skipping milestone '{0}': {1}".format(
                milestone.label, error))
            continue
        log.details("{0}: {1} seconds".format(
            milestone, elapsed.total_seconds))
        print(line(
            milestone, elapsed, marker, words=options.words, width=width))
        reported.append((milestone, elapsed))

    return reported
