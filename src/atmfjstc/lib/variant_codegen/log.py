import logging


def init_console_friendly_logging(level: int = logging.INFO):
    """
    Initializes logging for running the generator in a console. Specifically:

    - Messages go to stderr, so that generated code written to stdout is not polluted
    - The level is attached to each message as a string (INFO, DEBUG etc)
    """
    logging.basicConfig(
        level=level,
        style='{',
        format='{levelname}: {message}',
    )
