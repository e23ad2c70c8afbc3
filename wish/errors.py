import os

ERROR_MESSAGE = "An error has occurred\n"


class ShellError(Exception):
    """A failure confined to one sub-command.

    The message is kept for the log only; the user always sees
    ERROR_MESSAGE.
    """


class FatalShellError(ShellError):
    """A startup failure: the interpreter exits with status 1."""


def print_error():
    # Raw write on fd 2, also used in forked children before execv.
    os.write(2, ERROR_MESSAGE.encode())
