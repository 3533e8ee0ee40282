import logging

from numtower.config import Settings

PACKAGE_LOGGER = 'numtower'


def _level(settings: Settings) -> int:
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    return level


def get_logger(name: str, settings: Settings = None) -> logging.Logger:
    """
    the logger of a numtower module. Records are written once, by the one stream handler of the package logger, which
     keeps them from reaching the handlers of the application.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        package.addHandler(handler)
        package.propagate = False
        # library code stays quiet unless NUMTOWER_LOG_LEVEL asks otherwise
        package.setLevel(_level(Settings.from_env()))

    logger = logging.getLogger(name)
    if settings is not None:
        logger.setLevel(_level(settings))
    return logger
