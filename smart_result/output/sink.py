"""Diagnostic sinks: where swallowed exceptions get reported.

``wrap_exception`` converts any exception into the generic system-failure
envelope, so the caller never sees the original. The original is written to
a sink instead. Sinks are injected per call; when none is given the process
default is used (a ``RichSink`` on stderr unless replaced).

Every implementation must accept concurrent writers.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console

    from smart_result.core.config import DiagnosticsConfig

__all__ = [
    "DiagnosticSink",
    "MemorySink",
    "NullSink",
    "RichSink",
    "SinkRecord",
    "get_default_sink",
    "set_default_sink",
    "sink_from_config",
]


class DiagnosticSink(Protocol):
    """Protocol for recording exceptions that were converted to envelopes."""

    def exception(self, message: str, exc: BaseException) -> None:
        """Record exc with a short context message."""
        ...


class RichSink:
    """Production sink printing to stderr through Rich."""

    def __init__(
        self,
        *,
        traceback: bool = True,
        show_locals: bool = False,
        width: int | None = None,
        console: Console | None = None,
    ) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = console if console is not None else Console(stderr=True, width=width)
        self._traceback = traceback
        self._show_locals = show_locals

    @classmethod
    def from_config(cls, config: DiagnosticsConfig) -> RichSink:
        return cls(traceback=config.traceback, show_locals=config.show_locals, width=config.width)

    def exception(self, message: str, exc: BaseException) -> None:
        from rich.markup import escape

        self._console.print(
            f"[red bold]error:[/red bold] {escape(message)} "
            f"[dim]{type(exc).__name__}: {escape(str(exc))}[/dim]"
        )
        if self._traceback and exc.__traceback__ is not None:
            from rich.traceback import Traceback

            self._console.print(
                Traceback.from_exception(
                    type(exc),
                    exc,
                    exc.__traceback__,
                    show_locals=self._show_locals,
                )
            )


class NullSink:
    """Sink that drops everything."""

    def exception(self, message: str, exc: BaseException) -> None:
        return None


@dataclass(frozen=True, slots=True)
class SinkRecord:
    """A single record captured by MemorySink."""

    message: str
    exc: BaseException


def _empty_records() -> list[SinkRecord]:
    return []


@dataclass
class MemorySink:
    """Sink that captures records for tests.

    Appends are guarded by a lock so parallel callers can share one sink.
    """

    records: list[SinkRecord] = field(default_factory=_empty_records)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def exception(self, message: str, exc: BaseException) -> None:
        with self._lock:
            self.records.append(SinkRecord(message, exc))

    # Test helper methods

    def clear(self) -> None:
        with self._lock:
            self.records.clear()

    @property
    def exceptions(self) -> list[BaseException]:
        return [r.exc for r in self.records]

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.records]


def sink_from_config(config: DiagnosticsConfig) -> DiagnosticSink:
    """Build the sink described by a ``[diagnostics]`` config table."""
    if not config.enabled:
        return NullSink()
    return RichSink.from_config(config)


_default_lock = threading.Lock()
_default_sink: DiagnosticSink | None = None


def get_default_sink() -> DiagnosticSink:
    """Return the process default sink, creating a RichSink on first use."""
    global _default_sink
    with _default_lock:
        if _default_sink is None:
            _default_sink = RichSink()
        return _default_sink


def set_default_sink(sink: DiagnosticSink | None) -> DiagnosticSink | None:
    """Replace the process default sink and return the previous one.

    Passing None resets to a fresh RichSink on next use.
    """
    global _default_sink
    with _default_lock:
        previous = _default_sink
        _default_sink = sink
        return previous
