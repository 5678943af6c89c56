"""Text progress bar drawn in place on a terminal stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

BAR_LENGTH = 100


class ProgressBar:
    """Redraws a 100 column bar when progress advances by more than ``minupdate``."""

    def __init__(self, maxcount: int, minupdate: int = 1, stream: Optional[TextIO] = None) -> None:
        if maxcount <= 0:
            raise ValueError("maxcount must be positive")
        if minupdate <= 0:
            raise ValueError("minupdate must be positive")
        self.maxcount = maxcount
        self.minupdate = minupdate
        self.stream = stream if stream is not None else sys.stdout
        self._prev = 0
        self.stream.write("\n")
        self.stream.flush()

    def update(self, count: int, force: bool = False) -> None:
        """Redraw the bar for ``count`` if it moved far enough or ``force`` is set."""
        if not (force or count < self._prev or count - self._prev > self.minupdate):
            return
        self._prev = (count // self.minupdate) * self.minupdate
        points = int(BAR_LENGTH * (count / self.maxcount))
        filled = "*" * max(points, 0)
        empty = " " * max(BAR_LENGTH - points, 0)
        self.stream.write(f"\033[F[{filled}{empty}] {count}/{self.maxcount} - {points}%\n")
        self.stream.flush()

    def finish(self) -> None:
        """Draw the bar at full length."""
        self.update(self.maxcount, True)

    def __enter__(self) -> ProgressBar:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finish()