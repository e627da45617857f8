import logging.config


LOGGING_CONFIG_DICT = {
    'version': 1,
    'disable_existing_loggers': False,

    # Config for logging.root - the special Logger() object that by default collects all
    # messages from all modules in the system. All messages from child loggers are
    # propagated (redirected) to this logger (unless propagate=False is set).
    'root': {
        'level': logging.WARNING,
        'handlers': [
            'console',
        ],
    },
    'formatters': {
        'standard': {
            'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'stream': 'ext://sys.stderr',
        },
    },
}


def basicConfig(level: str = 'WARNING'):
    """ Do basic logging configuration for the command line

    Logs go to stderr: stdout is for the ids.
    """
    logging.config.dictConfig(LOGGING_CONFIG_DICT)

    logging.root.setLevel(level.upper())
