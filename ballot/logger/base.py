"""Logging for the ballot package.

Every logger lives under the ``ballot`` namespace and shares the handlers of
that root logger, which are installed once, on first use:

- a coloredlogs stream handler
- a rotating file handler, only when ``LOG_DIR`` is set

``LOG_LEVEL`` picks the level (a standard level name, or ``0`` to silence
logging entirely and hand out ``MockLogger`` objects).
"""

import logging
import os
from logging.handlers import RotatingFileHandler

import coloredlogs

ROOT_NAME = 'ballot'
VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

FORMAT = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)s %(message)s'.format(
    os.getenv('HOST_NAME', 'ballot')
)

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}

FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
}

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def level_from_env(value):
    if value is None:
        return logging.INFO
    if value == '0':
        return 0
    if value not in VALID_LVLS:
        raise ValueError("Log level {} not in valid levels {}".format(value, VALID_LVLS))
    return getattr(logging, value)


_LOG_LVL = level_from_env(os.getenv('LOG_LEVEL', None))


def _ignore(*args, **kwargs):
    return


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def colored_formatter():
    return coloredlogs.ColoredFormatter(FORMAT, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES)


def configure_root():
    root = logging.getLogger(ROOT_NAME)

    if root.handlers:
        return root

    stream = logging.StreamHandler()
    stream.setFormatter(colored_formatter())
    root.addHandler(stream)

    log_dir = os.getenv('LOG_DIR', None)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, '{}.log'.format(ROOT_NAME)),
            delay=True, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
        )
        file_handler.setFormatter(colored_formatter())
        root.addHandler(file_handler)

    root.setLevel(_LOG_LVL)
    root.propagate = False

    return root


def get_logger(name=''):
    if _LOG_LVL == 0:
        return MockLogger()

    root = configure_root()

    if not name:
        return root

    return root.getChild(name)


def set_log_level(level):
    global _LOG_LVL
    _LOG_LVL = level

    logging.getLogger(ROOT_NAME).setLevel(level)
