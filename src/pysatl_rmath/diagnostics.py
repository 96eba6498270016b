"""
Diagnostics
===========

Observational side channel of the evaluators.

- :class:`DiagnosticEvent`: a named, function-tagged notification.
- :class:`DiagnosticSink`: protocol receiving events.
- :class:`NullDiagnosticSink`, :class:`LoggingDiagnosticSink`,
  :class:`WarningsDiagnosticSink`, :class:`RecordingDiagnosticSink`: sink
  implementations.
- :class:`DistributionDiagnostic` and subclasses: exceptions raised *inside*
  scalar kernels to short-circuit an evaluation. They are caught by
  :mod:`pysatl_rmath.distributions.vectorization`, reported to the sink and
  replaced by their sentinel value; callers never see them.

Notes
-----
Sinks never influence the returned values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

log = logging.getLogger("pysatl_rmath")


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """
    Diagnostic notification.

    Parameters
    ----------
    source : str
        Name of the function that produced the event (e.g. ``"dnorm"``).
    message : str
        Human-readable description.
    """

    source: str
    message: str


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for diagnostic consumers."""

    def emit(self, event: DiagnosticEvent) -> None: ...


class NullDiagnosticSink:
    """Sink that discards every event."""

    __slots__ = ()

    def emit(self, event: DiagnosticEvent) -> None:
        return None


NULL_SINK = NullDiagnosticSink()
"""Shared stateless default sink."""


class LoggingDiagnosticSink:
    """
    Sink forwarding events to :mod:`logging`.

    Each event is logged on a child of ``logger`` named after the event
    source, so ``pysatl_rmath.dnorm`` can be filtered independently of
    ``pysatl_rmath.rchisq``.

    Parameters
    ----------
    logger : logging.Logger, optional
        Parent logger, defaults to the ``pysatl_rmath`` logger.
    level : int, default logging.WARNING
        Level used for every event.
    """

    __slots__ = ("_logger", "_level")

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self._logger = log if logger is None else logger
        self._level = level

    def emit(self, event: DiagnosticEvent) -> None:
        self._logger.getChild(event.source).log(self._level, "%s", event.message)


class RMathWarning(RuntimeWarning):
    """Warning category used by :class:`WarningsDiagnosticSink`."""


class WarningsDiagnosticSink:
    """Sink re-emitting events through :func:`warnings.warn`."""

    __slots__ = ()

    def emit(self, event: DiagnosticEvent) -> None:
        warnings.warn(f"{event.source}: {event.message}", RMathWarning, stacklevel=3)


@dataclass(slots=True)
class RecordingDiagnosticSink:
    """Sink keeping every received event in :attr:`events`."""

    events: list[DiagnosticEvent] = field(default_factory=list)

    def emit(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def sources(self) -> list[str]:
        """Return the source names of the recorded events, in order."""
        return [event.source for event in self.events]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


class DistributionDiagnostic(Exception):
    """
    Internal short-circuit of a scalar kernel.

    Parameters
    ----------
    source : str
        Name of the raising function.
    message : str
        Diagnostic message.
    value : float
        Result substituted for the evaluation.
    """

    def __init__(self, source: str, message: str, value: float) -> None:
        super().__init__(message)
        self.source = source
        self.message = message
        self.value = value

    @property
    def event(self) -> DiagnosticEvent:
        return DiagnosticEvent(self.source, self.message)


class ArgumentDomainError(DistributionDiagnostic):
    """A parameter or argument is outside its domain; the result is NaN."""

    def __init__(self, source: str) -> None:
        super().__init__(source, f"argument out of domain in '{source}'", math.nan)


class NonIntegerArgument(DistributionDiagnostic):
    """A discrete mass function was evaluated off its integer lattice."""

    def __init__(self, source: str, x: float, value: float) -> None:
        super().__init__(source, f"non-integer x = {x:f}", value)


__all__ = [
    "DiagnosticEvent",
    "DiagnosticSink",
    "NullDiagnosticSink",
    "NULL_SINK",
    "LoggingDiagnosticSink",
    "RMathWarning",
    "WarningsDiagnosticSink",
    "RecordingDiagnosticSink",
    "DistributionDiagnostic",
    "ArgumentDomainError",
    "NonIntegerArgument",
]
