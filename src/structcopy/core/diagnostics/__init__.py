"""Diagnostics: categorized property-level failures and the sinks receiving them."""

from structcopy.core.diagnostics.models import Diagnostic, DiagnosticKind
from structcopy.core.diagnostics.protocol import DiagnosticSink
from structcopy.core.diagnostics.sinks import CollectingSink, LoggingSink, RaisingSink

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "CollectingSink",
    "LoggingSink",
    "RaisingSink",
]
