# coding: utf-8

""" Config, Time, Milestone and Exceptions """

import configparser
import datetime
import io
import os
import re
import sys
from configparser import NoOptionError, NoSectionError
from typing import NamedTuple

from dateutil import parser as dateparser
from dateutil import tz

from achievements import utils
from achievements.utils import log

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Constants
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

# Config file location
CONFIG = os.path.expanduser("~/.achievements")

# Default maximum width
MAX_WIDTH = utils.MAX_WIDTH

# Default tier marker
DEFAULT_MARKER = "💎"

# Section holding the milestones
MILESTONES = "milestones"

# Built-in milestones used when no config file is available
DEFAULT_CONFIG = """
[general]
width = 79

[milestones]
Moon landing = 1969-07-20T20:17:40+00:00
Berlin Wall Fall = 1989-11-09T18:53:00+01:00
"""


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Exceptions
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class GeneralError(Exception):
    """ General achievements error """


class ConfigError(GeneralError):
    """ Milestones configuration problem """


class ConfigFileError(ConfigError):
    """ Problem with the config file """


class OptionError(GeneralError):
    """ Invalid command line """


class ClockUnavailable(GeneralError):
    """ Unable to read the current time """


class InvalidInterval(GeneralError):
    """ Milestone epoch lies in the future """


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Time
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def now():
    """ Current time as a timezone-aware UTC datetime """
    try:
        return datetime.datetime.now(tz=tz.UTC)
    except (OSError, OverflowError, ValueError) as error:
        log.debug(error)
        raise ClockUnavailable(
            "Unable to read the current time ({0}).".format(error))


def parse_instant(value):
    """
    Parse a point in time

    Accepts a ``datetime`` or an RFC 3339 / ISO 8601 string such as
    ``1969-07-20T20:17:40+00:00``. Values without an offset are taken
    as UTC. The result is always normalized to UTC.
    """
    if isinstance(value, datetime.datetime):
        instant = value
    else:
        try:
            instant = dateparser.isoparse(str(value).strip())
        except (ValueError, OverflowError) as error:
            log.debug(error)
            raise OptionError(
                "Invalid date format: '{0}', use YYYY-MM-DDTHH:MM:SS+HH:MM."
                .format(value))
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=tz.UTC)
    return instant.astimezone(tz.UTC)


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Milestone
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Milestone(NamedTuple):
    """ A named historical instant """
    label: str
    epoch: datetime.datetime

    @classmethod
    def create(cls, label, date):
        """ Strip the label and parse the date """
        label = label.strip()
        if not label:
            raise ConfigError("Milestone label cannot be empty.")
        try:
            epoch = parse_instant(date)
        except OptionError:
            raise ConfigError(
                "Invalid date '{0}' for milestone '{1}'.".format(date, label))
        return cls(label, epoch)

    def __str__(self):
        return "{0} ({1})".format(self.label, self.epoch.isoformat())


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Config
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Config(object):
    """ User config file """

    parser = None

    def __init__(self, config=None, path=None):
        """
        Read the config file

        Parse config from given string (config) or file (path).
        If no config or path given, default to "~/.achievements/config"
        which can be overrided by the ``ACHIEVEMENTS_DIR`` environment
        variable.
        """
        # Read the config only once (unless explicitly provided)
        if self.parser is not None and config is None and path is None:
            return
        parser = configparser.ConfigParser(
            interpolation=None, delimiters=("=",))
        # Milestone labels are case sensitive
        parser.optionxform = str
        # If config provided as string, parse it directly
        if config is not None:
            log.info("Inspecting config file from string")
            log.debug(config)
            self._read(parser, io.StringIO(config), "<string>")
            Config.parser = parser
            return
        if path is None:
            path = Config.path()
        try:
            log.info("Inspecting config file '{0}'.".format(path))
            with open(path, encoding="utf-8") as config_file:
                self._read(parser, config_file, path)
        except IOError as error:
            log.debug(error)
            Config.parser = None
            raise ConfigFileError(
                "Unable to read the config file '{0}'.".format(path))
        Config.parser = parser

    @staticmethod
    def _read(parser, stream, source):
        """ Parse the stream, turn parser errors into config errors """
        try:
            parser.read_file(stream, source=source)
        except configparser.Error as error:
            log.debug(error)
            raise ConfigError(
                "Invalid config file '{0}': {1}".format(
                    source, error.message.splitlines()[0]))

    @property
    def width(self):
        """ Maximum width of the report """
        try:
            width = int(self.parser.get("general", "width"))
        except (NoOptionError, NoSectionError):
            return MAX_WIDTH
        except ValueError:
            raise ConfigError("Invalid width '{0}', should be integer.".format(
                self.parser.get("general", "width")))
        if width < utils.MIN_WIDTH:
            raise ConfigError("Invalid width '{0}', use at least {1}.".format(
                width, utils.MIN_WIDTH))
        return width

    @property
    def marker(self):
        """ Decorative tier marker """
        try:
            return self.parser.get("general", "marker")
        except (NoOptionError, NoSectionError):
            return DEFAULT_MARKER

    @property
    def milestones(self):
        """ Configured milestones in the order of definition """
        if not self.parser.has_section(MILESTONES):
            log.warning(
                "No [{0}] section found in the config file.".format(
                    MILESTONES))
            return ()
        return tuple(
            Milestone.create(label, date)
            for label, date in self.parser.items(MILESTONES))

    @staticmethod
    def path():
        """ Detect config file path """
        try:
            directory = os.environ["ACHIEVEMENTS_DIR"]
        except KeyError:
            directory = CONFIG
        # Detect config file (even before options are parsed)
        filename = "config"
        matched = re.search(r"--confi?g?[ =](\S+)", " ".join(sys.argv))
        if matched:
            filepath, filename = os.path.split(matched.groups()[0])
            if filepath:
                directory = filepath
        return directory.rstrip("/") + "/" + filename

    @staticmethod
    def example():
        """ Return config example """
        return DEFAULT_CONFIG.lstrip()
