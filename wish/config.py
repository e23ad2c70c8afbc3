import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_PROMPT = "wish> "
DEFAULT_PATH = ("/bin",)


@dataclass
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    default_path: Tuple[str, ...] = DEFAULT_PATH
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        return cls(
            log_file=environ.get("WISH_LOG_FILE") or None,
            log_level=environ.get("WISH_LOG_LEVEL", "WARNING").upper(),
        )
