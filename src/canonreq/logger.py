import logging
import coloredlogs

from .config import effective_logger_level, effective_logger_colored

GREEN = 41
BLUE = 75
PURPLE = 140
RED = 9
GRAY = 240

DEFAULT_FIELD_STYLES = {
    "asctime": {"color": GREEN},
    "levelname": {"color": GRAY, "bold": True},
    "name": {"color": BLUE},
    "process": {"color": PURPLE},
}

DEFAULT_LEVEL_STYLES = {
    "debug": {"color": GREEN},
    "info": {},
    "error": {"color": RED},
    "critical": {"color": RED},
    "warning": {"color": "yellow"},
}


def config_logging(config):
    level = effective_logger_level(config)
    fmt = config.logger_format
    datefmt = config.logger_datefmt
    logging.getLogger("canonreq").setLevel(level)
    if effective_logger_colored(config):
        coloredlogs.install(
            fmt=fmt,
            datefmt=datefmt,
            field_styles=DEFAULT_FIELD_STYLES,
            level_styles=DEFAULT_LEVEL_STYLES,
        )
        # coloredlogs sets the root level, keep third-party loggers quiet
        logging.getLogger().setLevel(logging.WARNING)
        for h in logging.getLogger().handlers:
            h.setLevel(logging.NOTSET)
    else:
        logging.basicConfig(format=fmt, datefmt=datefmt)
