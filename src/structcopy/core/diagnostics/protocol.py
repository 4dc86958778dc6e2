"""Protocol for diagnostic sinks.

The engine never raises property-level failures. It emits them to a sink, and
the host decides whether to log, count or fail on them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from structcopy.core.diagnostics.models import Diagnostic


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives diagnostics emitted during a copy.

    Built-in implementations:
        - LoggingSink: forwards to the `structcopy.diagnostics` logger (default)
        - CollectingSink: keeps diagnostics in a list for inspection
        - RaisingSink: raises the matching exception immediately

    Thread Safety:
        A sink shared by copies running on several threads must tolerate
        concurrent `emit` calls.
    """

    def emit(self, diagnostic: Diagnostic) -> None:
        """Handle one diagnostic.

        Args:
            diagnostic: The property-level failure.
        """
        ...
