import enum
import logging
import logging.config
import os
import typing

SCREEN_LOG_PATHS = frozenset({"-", "/dev/stdout"})

DATE_FORMAT = "%Y-%m-%d %H:%M:%S%z"
SCREEN_FORMAT = "[%(levelname)s]%(asctime)s: %(message)s"
FILE_FORMAT = "[%(levelname)s]%(asctime)s:%(module)s:%(funcName)s:%(lineno)s: %(message)s"

SHORT_LEVEL_NAMES = {
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "EROR",
    logging.DEBUG: "DEBG",
    logging.CRITICAL: "CTIC",
}


class LoggingLevel(enum.Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET


def setup_logger(
    log_paths: typing.Tuple[str, ...] = ("/dev/stdout",),
    logging_config_file: typing.Optional[str] = None,
    logging_level: str = LoggingLevel.INFO.name,
):
    """configure the root logger, BidirectionalMap and the benchmark only ever log through it

    "-" or "/dev/stdout" logs to screen, any other path logs to a file rotated at midnight. A ``fileConfig`` style
    config file, if given, replaces all of that. With neither paths nor a config file, logging is left untouched.
    """

    if logging_config_file is not None:
        logging.config.fileConfig(logging_config_file, disable_existing_loggers=True)
        logging.info(f"logging configured from {logging_config_file}")
        return

    if not log_paths:
        return

    if logging_level not in LoggingLevel.__members__:
        raise ValueError(f"unknown logging level: {logging_level}, must be one of {list(LoggingLevel.__members__)}")

    for level, name in SHORT_LEVEL_NAMES.items():
        logging.addLevelName(level, name)

    handlers = {_handler_name(path): _handler_config(path, logging_level) for path in log_paths}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "screen": {"format": SCREEN_FORMAT, "datefmt": DATE_FORMAT},
                "file": {"format": FILE_FORMAT, "datefmt": DATE_FORMAT},
            },
            "handlers": handlers,
            "loggers": {"": {"handlers": list(handlers), "level": "DEBUG", "propagate": True}},
        }
    )
    logging.info(f"logging to {log_paths}")


def _handler_name(path: str) -> str:
    return "console" if path in SCREEN_LOG_PATHS else path


def _handler_config(path: str, logging_level: str) -> typing.Dict:
    if path in SCREEN_LOG_PATHS:
        return {
            "class": "logging.StreamHandler",
            "level": logging_level,
            "formatter": "screen",
            "stream": "ext://sys.stdout",
        }

    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "level": logging_level,
        "formatter": "file",
        "filename": os.path.expandvars(os.path.expanduser(path)),
        "when": "midnight",
    }
