"""
Tests for diagnostic events, sinks and the internal short-circuit exceptions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math

import pytest

from pysatl_rmath import dnorm, qnorm
from pysatl_rmath.diagnostics import (
    NULL_SINK,
    ArgumentDomainError,
    DiagnosticEvent,
    DiagnosticSink,
    LoggingDiagnosticSink,
    NonIntegerArgument,
    RecordingDiagnosticSink,
    RMathWarning,
    WarningsDiagnosticSink,
)


class TestSinks:
    @pytest.mark.parametrize(
        "sink",
        [NULL_SINK, LoggingDiagnosticSink(), WarningsDiagnosticSink(), RecordingDiagnosticSink()],
    )
    def test_protocol(self, sink):
        assert isinstance(sink, DiagnosticSink)

    def test_null_sink_discards(self):
        assert NULL_SINK.emit(DiagnosticEvent("dnorm", "ignored")) is None

    def test_recording_sink(self):
        sink = RecordingDiagnosticSink()
        sink.emit(DiagnosticEvent("dnorm", "a"))
        sink.emit(DiagnosticEvent("rchisq", "b"))

        assert len(sink) == 2
        assert sink.sources() == ["dnorm", "rchisq"]
        sink.clear()
        assert len(sink) == 0

    def test_logging_sink_uses_child_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pysatl_rmath"):
            LoggingDiagnosticSink().emit(DiagnosticEvent("dnorm", "argument out of domain"))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "pysatl_rmath.dnorm"
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "argument out of domain"

    def test_logging_sink_level_and_parent(self, caplog):
        parent = logging.getLogger("custom.rmath")
        with caplog.at_level(logging.INFO, logger="custom.rmath"):
            LoggingDiagnosticSink(parent, level=logging.INFO).emit(DiagnosticEvent("qexp", "m"))

        assert [r.name for r in caplog.records] == ["custom.rmath.qexp"]
        assert caplog.records[0].levelno == logging.INFO

    def test_warnings_sink(self):
        with pytest.warns(RMathWarning, match="qnorm: argument out of domain"):
            WarningsDiagnosticSink().emit(DiagnosticEvent("qnorm", "argument out of domain"))


class TestDiagnosticExceptions:
    def test_argument_domain_error(self):
        error = ArgumentDomainError("qnorm")
        assert error.event == DiagnosticEvent("qnorm", "argument out of domain in 'qnorm'")
        assert math.isnan(error.value)

    def test_non_integer_argument(self):
        error = NonIntegerArgument("dgeom", 1.5, -math.inf)
        assert error.event.message == "non-integer x = 1.500000"
        assert error.value == -math.inf


class TestEmissionThroughEvaluators:
    def test_emission_does_not_change_result(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pysatl_rmath"):
            logged = dnorm(1.0, 0.0, -1.0, sink=LoggingDiagnosticSink())
        silent = dnorm(1.0, 0.0, -1.0)

        assert math.isnan(logged) and math.isnan(silent)
        assert [r.name for r in caplog.records] == ["pysatl_rmath.dnorm"]

    def test_warnings_through_evaluator(self):
        with pytest.warns(RMathWarning, match="qnorm"):
            assert math.isnan(qnorm(1.5, sink=WarningsDiagnosticSink()))
