"""Collection of read statistics for an open database."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

__all__ = ["Statistics"]


@dataclass
class Statistics:
    """Counts physical page reads while collection is switched on."""

    collect: bool = False
    pg_reads: int = 0

    def start(self) -> None:
        """Begin counting reads."""
        self.collect = True

    def stop(self) -> None:
        """Stop counting reads; the count so far is kept."""
        self.collect = False

    def record_read(self) -> None:
        """Note one physical page read if collection is on."""
        if self.collect:
            self.pg_reads += 1

    def dump(self, out: TextIO | None = None) -> None:
        """Write the counters to ``out`` (standard output by default)."""
        stream = sys.stdout if out is None else out
        stream.write(f"Physical Page Reads: {self.pg_reads}\n")