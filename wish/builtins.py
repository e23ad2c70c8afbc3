import os

from wish.errors import ShellError
from wish.log import get_logger

logger = get_logger("builtins")

# -------------------------------
# Built-in Commands
# -------------------------------

def builtin_exit(args, search_path):
    if args:
        raise ShellError("exit takes no arguments")
    logger.debug("exit requested")
    raise SystemExit(0)


def builtin_cd(args, search_path):
    if len(args) != 1:
        raise ShellError(f"cd takes exactly one argument, got {len(args)}")
    try:
        os.chdir(args[0])
    except OSError as e:
        raise ShellError(f"cd {args[0]}: {e}") from e
    logger.debug("changed directory to %s", args[0])


def builtin_path(args, search_path):
    search_path.set(args)
    logger.debug("search path set to %r", search_path.entries)


BUILTINS = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "path": builtin_path,
}


def is_builtin(name):
    return name in BUILTINS


def run_builtin(argv, search_path):
    # Raises ShellError on misuse, SystemExit for a valid exit.
    BUILTINS[argv[0]](argv[1:], search_path)
