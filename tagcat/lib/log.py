import argparse
import logging
from   logging import DEBUG, INFO, WARNING, ERROR, CRITICAL

#-------------------------------------------------------------------------------

FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)-7s] %(name)s: %(message)s"
DATEFMT = "%H:%M:%S"

LEVEL_NAMES = dict(
    DEBUG   =DEBUG,
    INFO    =INFO,
    WARNING =WARNING,
    ERROR   =ERROR,
    CRITICAL=CRITICAL,
)


def ensure_level(level):
    """
    Converts a level number or name to a level number.

    @raise ValueError
      `level` isn't a positive number or a known level name.
    """
    try:
        level = int(level)
    except ValueError:
        try:
            level = LEVEL_NAMES[str(level).upper()]
        except KeyError:
            raise ValueError(f"not a log level: {level}") from None
    if 0 < level:
        return level
    else:
        raise ValueError(f"invalid log level: {level}")


def configure(level=WARNING):
    logging.basicConfig(format=FORMAT, datefmt=DATEFMT)
    logging.getLogger().setLevel(ensure_level(level))


def add_option(parser):
    """
    Adds a logging command-line option to an `argparse.Parser`.
    """

    class Action(argparse.Action):

        def __call__(self, parser, namespace, value, option_string):
            try:
                setattr(namespace, self.dest, ensure_level(value))
            except ValueError as exc:
                parser.error(str(exc))

    parser.add_argument(
        "--log", metavar="LEVEL", default=WARNING, action=Action,
        help="set root logging level to LEVEL")


