"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from wordladder.services.ladder import PathEngine
from wordladder.services.result import ServiceResult
from wordladder.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_annotations(self) -> None:
        span = Span(name="root")
        span.annotate("pairs", 12)
        assert span.to_dict()["annotations"] == {"pairs": 12}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_span_tree(self) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("inner") as span:
                assert span is not None
                span.annotate("n", 1)
            return ServiceResult(ok=True, op="op")

        enable_telemetry()
        result = op()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"].endswith("op")
        assert tree["children"][0]["name"] == "inner"
        assert tree["children"][0]["annotations"] == {"n": 1}
        assert get_current_span() is None

    def test_exception_resets_span(self) -> None:
        @traced
        def boom() -> ServiceResult:
            raise RuntimeError("x")

        enable_telemetry()
        with pytest.raises(RuntimeError):
            boom()
        assert _current_span.get() is None

    def test_engine_phases_recorded(self) -> None:
        enable_telemetry()
        engine = PathEngine()
        populate = engine.populate(["CAT", "HAT"])
        assert populate.meta is not None
        names = [c["name"] for c in populate.meta["telemetry"]["children"]]
        assert names == ["insert_vertices", "connect_pairs"]

        precompute = engine.precompute()
        assert precompute.meta is not None
        sweeps = precompute.meta["telemetry"]["children"][0]
        assert sweeps["name"] == "sweeps"
        assert sweeps["annotations"] == {"roots": 2, "pairs": 4}

    def test_nested_traced_calls_report_once(self, word_file: object) -> None:
        enable_telemetry()
        result = PathEngine().populate_file(word_file)  # type: ignore[arg-type]
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "PathEngine.populate_file"
        assert tree["children"][0]["name"] == "PathEngine.populate"
