import os
import sys

from wish.builtins import is_builtin, run_builtin
from wish.errors import ShellError, print_error
from wish.log import get_logger
from wish.parsing import parse_command, split_commands, trim

logger = get_logger("engine")

REDIRECT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
REDIRECT_MODE = 0o666

# -------------------------------
# Process handling
# -------------------------------

def _child(executable, argv, output):
    try:
        if output:
            fd = os.open(output, REDIRECT_FLAGS, REDIRECT_MODE)
            os.dup2(fd, 1)
            os.dup2(fd, 2)
            os.close(fd)
        os.execv(executable, argv)
    except (OSError, ValueError) as e:
        logger.debug("child %d: %s: %s", os.getpid(), executable, e)
        print_error()
    finally:
        os._exit(1)


def spawn(executable, argv, output=None):
    # Unflushed output would be duplicated in the child.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as e:
        raise ShellError(f"fork failed: {e}") from e
    if pid == 0:
        _child(executable, argv, output)
    logger.debug("spawned %d: %s %r > %s", pid, executable, argv, output)
    return pid


def wait_for(pid):
    while True:
        try:
            os.waitpid(pid, 0)
            return
        except InterruptedError:
            continue
        except OSError as e:
            logger.debug("wait for %d failed: %s", pid, e)
            return


def wait_all(pids):
    for pid in pids:
        wait_for(pid)

# -------------------------------
# Execution
# -------------------------------

class Engine:
    def __init__(self, search_path):
        self.search_path = search_path

    def execute_line(self, line):
        """Dispatch every sub-command of ``line`` and wait for its children.

        Errors are reported per sub-command and never stop the rest of
        the line.  Children already spawned are reaped even when ``exit``
        ends the line early.
        """
        pids = []
        try:
            for subcommand in split_commands(trim(line)):
                try:
                    pid = self.dispatch(parse_command(subcommand))
                except ShellError as e:
                    logger.debug("%r: %s", subcommand, e)
                    print_error()
                    continue
                if pid is not None:
                    pids.append(pid)
        finally:
            wait_all(pids)

    def dispatch(self, command):
        if is_builtin(command.name):
            # Built-ins ignore any redirection target.
            run_builtin(command.argv, self.search_path)
            return None

        executable = self.search_path.resolve(command.name)
        if executable is None:
            raise ShellError(f"{command.name}: not found in {self.search_path.entries!r}")
        return spawn(executable, command.argv, command.output)
