#!/usr/bin/env python3
import sys

from wish.config import ShellConfig
from wish.engine import Engine
from wish.errors import FatalShellError, print_error
from wish.log import get_logger, setup_logging
from wish.search_path import SearchPath

logger = get_logger("shell")

# Bytes that are not valid UTF-8 survive the round trip through os calls.
INPUT_ERRORS = "surrogateescape"

# -------------------------------
# Input
# -------------------------------

def open_input(args):
    # None means interactive mode on stdin.
    if len(args) > 1:
        raise FatalShellError(f"usage: wish [batch-file], got {len(args)} arguments")
    if not args:
        return None
    try:
        return open(args[0], "r", encoding=sys.getfilesystemencoding(), errors=INPUT_ERRORS)
    except OSError as e:
        raise FatalShellError(f"cannot open batch file {args[0]}: {e}") from e

# -------------------------------
# Main Loop
# -------------------------------

class Shell:

    def __init__(self, config, batch=None):
        self.config = config
        self.batch = batch
        self.interactive = batch is None
        self.search_path = SearchPath(config.default_path)
        self.engine = Engine(self.search_path)

    def read_line(self):
        if not self.interactive:
            return self.batch.readline()
        sys.stdout.write(self.config.prompt)
        sys.stdout.flush()
        return sys.stdin.readline()

    def run(self):
        while True:
            line = self.read_line()
            if line == "":
                logger.debug("end of input")
                return 0
            self.engine.execute_line(line)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    config = ShellConfig.from_env()
    setup_logging(config)

    try:
        batch = open_input(argv)
    except FatalShellError as e:
        logger.debug("startup failed: %s", e)
        print_error()
        return 1

    if batch is None:
        sys.stdin.reconfigure(encoding=sys.getfilesystemencoding(), errors=INPUT_ERRORS)
    try:
        return Shell(config, batch).run()
    finally:
        if batch is not None:
            batch.close()


if __name__ == "__main__":
    sys.exit(main())
