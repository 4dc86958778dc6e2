"""Built-in diagnostic sinks."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from structcopy.core.diagnostics.models import Diagnostic, DiagnosticKind

logger = logging.getLogger("structcopy.diagnostics")


class LoggingSink:
    """Forward diagnostics to the `structcopy.diagnostics` logger.

    Args:
        level: Logging level name or number used for every diagnostic.
    """

    def __init__(self, level: int | str = logging.WARNING) -> None:
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level!r}")
            level = resolved
        self.level = level

    def emit(self, diagnostic: Diagnostic) -> None:
        logger.log(self.level, "%s", diagnostic)


class CollectingSink:
    """Keep diagnostics in emission order.

    Usage:
        sink = CollectingSink()
        copier = Copier(sink=sink)
        copier.copy_into(dst, src)
        mismatches = sink.by_kind(DiagnosticKind.TYPE_MISMATCH)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self.diagnostics.append(diagnostic)

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Diagnostics of a single category."""
        return [d for d in self.diagnostics if d.kind is kind]

    def clear(self) -> None:
        with self._lock:
            self.diagnostics.clear()

    def raise_first(self) -> None:
        """Raise the error matching the first collected diagnostic, if any."""
        if self.diagnostics:
            raise self.diagnostics[0].to_error()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self.diagnostics))


class RaisingSink:
    """Turn every diagnostic into an exception."""

    def emit(self, diagnostic: Diagnostic) -> None:
        raise diagnostic.to_error()
