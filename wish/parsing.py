import re
from dataclasses import dataclass, field
from typing import List, Optional

from wish.errors import ShellError

WHITESPACE = " \t\n"
_SPLIT_RE = re.compile(r"[ \t\n]+")

# -------------------------------
# Text utilities
# -------------------------------

def trim(text):
    return text.strip(WHITESPACE)


def tokenize(text):
    return [token for token in _SPLIT_RE.split(text) if token]

# -------------------------------
# Line parsing
# -------------------------------

@dataclass
class ParsedCommand:
    argv: List[str] = field(default_factory=list)
    output: Optional[str] = None

    @property
    def name(self):
        return self.argv[0]


def split_commands(line):
    commands = []
    for piece in line.split("&"):
        piece = trim(piece)
        if piece:
            commands.append(piece)
    return commands


def parse_redirection(subcommand):
    count = subcommand.count(">")
    if count > 1:
        raise ShellError(f"more than one '>' in {subcommand!r}")

    command, output = subcommand, None
    if count == 1:
        command, _, right = subcommand.partition(">")
        targets = tokenize(trim(right))
        if len(targets) != 1:
            raise ShellError(f"expected one redirection target, got {targets!r}")
        output = targets[0]

    command = trim(command)
    if not command:
        raise ShellError("empty command before '>'")
    return command, output


def parse_command(subcommand):
    # Paths and argv passed to the os module cannot hold NUL.
    if "\0" in subcommand:
        raise ShellError(f"NUL byte in {subcommand!r}")
    command, output = parse_redirection(subcommand)
    argv = tokenize(command)
    if not argv:
        raise ShellError(f"no program name in {subcommand!r}")
    return ParsedCommand(argv, output)
