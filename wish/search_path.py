import os

from wish.config import DEFAULT_PATH


class SearchPath:
    """Ordered list of directories probed for executables.

    Duplicates are kept; earlier entries win.  The list is only ever
    replaced as a whole.
    """

    def __init__(self, default=DEFAULT_PATH):
        self._default = tuple(default)
        self._dirs = []
        self.init()

    def init(self):
        self._dirs = list(self._default)

    def set(self, entries):
        self._dirs = list(entries)

    @property
    def entries(self):
        return tuple(self._dirs)

    def __len__(self):
        return len(self._dirs)

    def __repr__(self):
        return f"SearchPath({self._dirs!r})"

    @staticmethod
    def join(directory, name):
        if directory.endswith("/"):
            return directory + name
        return directory + "/" + name

    def candidates(self, name):
        return [self.join(d, name) for d in self._dirs]

    def resolve(self, name):
        for full in self.candidates(name):
            if os.access(full, os.X_OK):
                return full
        return None
