""" Logging, coloring, constants & text utilities """

import logging
import os
import re
import sys

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Constants
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

# Default maximum width
MAX_WIDTH = 79

# Narrowest report output allowed
MIN_WIDTH = 10

# Coloring
COLOR_OFF = 0
COLOR_ON = 1
COLOR_AUTO = 2

# Logging
LOG_ERROR = logging.ERROR
LOG_WARN = logging.WARN
LOG_INFO = logging.INFO
LOG_DEBUG = logging.DEBUG
LOG_DETAILS = 7
LOG_ALL = 1

# Terminal color codes
ANSI_COLORS = {
    "black": 30, "red": 31, "green": 32, "yellow": 33,
    "blue": 34, "magenta": 35, "cyan": 36, "white": 37,
    }


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Utils
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def shorted(text, width=MAX_WIDTH):
    """
    Shorten text, make sure it's not cut in the middle of a word

    The result including the trailing ellipsis fits the width.
    """
    if len(text) <= width:
        return text
    return "{0}...".format(re.sub(r"\W+\w*$", "", text[:width - 3]))


def pluralize(singular, count=None):
    """
    Naively pluralize words

    When ``count`` is given the singular form is returned for one.
    """
    if count == 1:
        return singular
    if singular.endswith("y") and not singular.endswith("ay"):
        return f"{singular[:-1]}ies"
    if singular.endswith("s"):
        return f"{singular}es"
    return f"{singular}s"


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Coloring
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def color(text, foreground=None, background=None, bold=False, enabled=True):
    """
    Wrap text into terminal color sequences

    Colors are names from ``ANSI_COLORS``, the "light" prefix (e.g.
    lightwhite) selects the bold variant of the foreground color.
    """
    if not enabled:
        return text
    if foreground and foreground.startswith("light"):
        bold = True
        foreground = foreground[len("light"):]
    codes = ["1" if bold else "0"]
    if foreground:
        codes.append(str(ANSI_COLORS[foreground]))
    if background:
        codes.append(str(ANSI_COLORS[background] + 10))
    return "\033[{0}m{1}\033[1;m".format(";".join(codes), text)


class Coloring():
    """
    Coloring mode shared by the whole program

    Unless set explicitly the mode is taken from the ``COLOR``
    environment variable::

        COLOR=0 ... COLOR_OFF .... coloring disabled
        COLOR=1 ... COLOR_ON ..... coloring enabled
        COLOR=2 ... COLOR_AUTO ... if terminal attached (default)
    """

    MODES = {
        COLOR_OFF: "COLOR_OFF",
        COLOR_ON: "COLOR_ON",
        COLOR_AUTO: "COLOR_AUTO",
        }
    _instance = None
    _mode = None

    def __new__(cls, mode=None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, mode=None):
        if mode is not None or self._mode is None:
            self.set(mode)

    def set(self, mode=None):
        """ Set the coloring mode, detect from environment if not given """
        if mode is None:
            try:
                mode = int(os.environ.get("COLOR", COLOR_AUTO))
            except ValueError:
                mode = COLOR_AUTO
        if mode not in self.MODES:
            raise RuntimeError(f"Invalid color mode '{mode}'")
        Coloring._mode = mode

    def get(self):
        """ Get the current color mode """
        return self._mode

    def enabled(self):
        """ True if log messages should be colored """
        if self._mode == COLOR_AUTO:
            return sys.stderr.isatty()
        return self._mode == COLOR_ON


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Logging
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Logging():
    """
    Logger setup with colored level names

    Log level is selected by the ``DEBUG`` environment variable::

        DEBUG=0 ... LOG_WARN (default)
        DEBUG=1 ... LOG_INFO
        DEBUG=2 ... LOG_DEBUG
        DEBUG=3 ... LOG_DETAILS
        DEBUG=4 ... LOG_ALL (log all messages)
    """

    # Level name and color
    LEVELS = {
        LOG_ERROR: ("ERROR", "red"),
        LOG_WARN: ("WARNING", "yellow"),
        LOG_INFO: ("INFO", "blue"),
        LOG_DEBUG: ("DEBUG", "green"),
        LOG_DETAILS: ("DETAILS", "cyan"),
        LOG_ALL: ("ALL", "magenta"),
        }
    # Environment variable mapping
    VERBOSITY = [LOG_WARN, LOG_INFO, LOG_DEBUG, LOG_DETAILS, LOG_ALL]

    # Loggers prepared so far
    _loggers: dict = {}

    def __init__(self, name='achievements'):
        if name not in Logging._loggers:
            Logging._loggers[name] = self._create_logger(name)
            self.logger = Logging._loggers[name]
            self.set()
        else:
            self.logger = Logging._loggers[name]

    class ColoredFormatter(logging.Formatter):
        """ Prefix messages with the (colored) level name """

        def format(self, record):
            name, text_color = Logging.LEVELS.get(
                record.levelno, (record.levelname, "black"))
            if Coloring().enabled():
                prefix = color(f" {name} ", "lightwhite", text_color)
            else:
                prefix = f"[{name}]"
            return f"{prefix} {record.getMessage()}"

    @staticmethod
    def _create_logger(name):
        """ Create logger with the colored stderr handler """
        logger = logging.getLogger(name)
        handler = logging.StreamHandler()
        handler.setFormatter(Logging.ColoredFormatter())
        logger.addHandler(handler)
        logger.details = lambda message: logger.log(LOG_DETAILS, message)
        return logger

    def set(self, level=None):
        """ Set the log level, detect from environment if not given """
        if level is None:
            try:
                verbosity = int(os.environ.get("DEBUG", 0))
                level = Logging.VERBOSITY[max(verbosity, 0)]
            except (ValueError, IndexError):
                level = LOG_WARN
        self.logger.setLevel(level)

    def get(self):
        """ Get the current log level """
        return self.logger.level


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Default Logger
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

# Create the default output logger
log = Logging('achievements').logger
