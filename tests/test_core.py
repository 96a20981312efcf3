"""Tests for the editor-facing processor."""

import json
import math

import numpy as np
import pytest

from quadwarp.core import WarpProcessor, rect_corners
from quadwarp.errors import InvalidInputError
from quadwarp.geometry.primitives import Point
from quadwarp.utils.metrics import PerformanceMetrics


SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]
SKEWED = [(10, 10), (110, 5), (105, 110), (5, 105)]


class TestWarpProcessor:
    """Test WarpProcessor."""

    def test_processor_initialization(self):
        """Test the processor picks up default settings."""
        processor = WarpProcessor()
        assert processor.canvas_width == 800
        assert processor.canvas_height == 800
        assert processor.codec.precision == 10
        assert processor.solver.verify is False

    def test_processor_config_override(self):
        """Test overrides reach the components."""
        processor = WarpProcessor({"codec": {"precision": 4}, "editor": {"canvas_width": 640}})
        assert processor.codec.precision == 4
        assert processor.canvas_width == 640
        assert processor.canvas_height == 800

    def test_rect_corners_order(self):
        """Test handles go top-left, bottom-left, top-right, bottom-right."""
        assert rect_corners(200, 100) == [Point(0, 0), Point(0, 100), Point(200, 0), Point(200, 100)]
        assert WarpProcessor().reference_corners() == rect_corners(800, 800)

    def test_process_frame(self):
        """Test one drag frame produces every output form."""
        result = WarpProcessor().process_frame(SQUARE, SKEWED)

        assert result["status"] == "ok"
        assert result["reason"] is None
        assert len(result["matrix"]) == 4
        assert len(result["matrix3d"]) == 16
        assert result["style"]["transform"].startswith("matrix3d(")
        assert result["bounding_box"] == {"left": 5, "top": 5, "width": 105, "height": 105}
        assert result["discrepancies"] == []
        assert result["processing_time_ms"] >= 0

    def test_process_frame_is_json_serializable(self):
        """Test the frame output can be stored by the editor model."""
        result = WarpProcessor().process_frame(SQUARE, SKEWED)
        restored = json.loads(json.dumps(result))
        assert restored["matrix"] == result["matrix"]

    def test_process_frame_degenerate(self):
        """Test a collapsed gesture keeps the element undeformed."""
        result = WarpProcessor().process_frame(SQUARE, [(50, 50)] * 4)
        assert result["status"] == "degenerate"
        assert result["reason"]
        assert result["matrix"] == np.eye(4).tolist()
        assert result["matrix3d"] == [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]

    def test_process_frame_with_verification(self):
        """Test verification results are attached when enabled."""
        processor = WarpProcessor({"solver": {"verify": True}, "verifier": {"tolerance": -1.0}})
        result = processor.process_frame(SQUARE, SKEWED)
        assert [d["index"] for d in result["discrepancies"]] == [0, 1, 2, 3]

    def test_process_frame_coincident_handles(self):
        """Test two handles dropped on one spot keep the element undeformed."""
        result = WarpProcessor().process_frame(SQUARE, [(0, 0), (0, 0), (100, 100), (0, 100)])
        assert result["status"] == "degenerate"
        assert result["matrix"] == np.eye(4).tolist()

    def test_degeneracy_tolerance_from_config(self):
        """Test the solver picks up the configured degeneracy tolerance."""
        processor = WarpProcessor({"solver": {"degeneracy_tolerance": 1e-6}})
        assert processor.solver.degeneracy_tolerance == 1e-6

    def test_processing_time_from_frame_timer(self, monkeypatch):
        """Test the frame time comes from the performance timer, rounded."""
        monkeypatch.setattr(PerformanceMetrics, "stop_timer", lambda self, name: 1.23456789)
        result = WarpProcessor().process_frame(SQUARE, SKEWED)
        assert result["processing_time_ms"] == 1.2346

    def test_process_frame_rejects_bad_input(self):
        """Test misuse is surfaced."""
        with pytest.raises(InvalidInputError):
            WarpProcessor().process_frame(SQUARE, SKEWED[:3])

    def test_move_handle_clamps(self):
        """Test dragged handles stay inside the canvas."""
        processor = WarpProcessor()
        handles = processor.reference_corners()
        moved = processor.move_handle(handles, 3, 900, -5)

        assert moved[3] == Point(800, 0)
        assert moved[:3] == handles[:3]
        assert handles[3] == Point(800, 800)

    def test_move_handle_custom_canvas(self):
        """Test explicit canvas size."""
        moved = WarpProcessor().move_handle(SQUARE, 0, 30.5, 250, width=100, height=100)
        assert moved[0] == Point(30.5, 100)

    @pytest.mark.parametrize("index", [-1, 4, 1.0, True, None])
    def test_move_handle_bad_index(self, index):
        """Test out-of-range handle index."""
        with pytest.raises(InvalidInputError):
            WarpProcessor().move_handle(SQUARE, index, 1, 1)

    def test_restore_handles(self):
        """Test a persisted matrix restores the dragged handles."""
        processor = WarpProcessor()
        stored = json.loads(json.dumps(processor.process_frame(SQUARE, SKEWED)["matrix"]))
        handles = processor.restore_handles(SQUARE, stored)
        for actual, expected in zip(handles, SKEWED):
            assert math.hypot(actual.x - expected[0], actual.y - expected[1]) < 1e-6

    def test_restore_handles_without_matrix(self):
        """Test elements saved without a matrix keep their reference corners."""
        handles = WarpProcessor().restore_handles(SQUARE, None)
        assert handles == [Point(*p) for p in SQUARE]
