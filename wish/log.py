import logging


LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s[%(process)d]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(subsystem):
    return logging.getLogger(f"wish.{subsystem}")


def setup_logging(config):
    """Configure the ``wish`` logger hierarchy.

    Log records never go to the shell's own stdout or stderr: without a
    log file everything is dropped.
    """
    root = logging.getLogger("wish")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = False

    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    root.setLevel(level)

    if config.log_file:
        handler = logging.FileHandler(config.log_file, errors="backslashreplace")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    return root
