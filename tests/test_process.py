"""Tests for the demo driver."""

import logging

from data import canvasShape, sampleTranslation
from geometry import Point, Rectangle
from process import describe, main, run


def test_describe() -> None:
    line = describe("sample", Rectangle(Point(1, 2), Point(5, 9)))
    assert line == "sample: bottom_left=(1, 2) top_right=(5, 9) width=4 height=7 area=28"


def test_run_moves_a_copy() -> None:
    before, after, image = run()
    dx, dy = sampleTranslation()
    assert before == Rectangle(Point(1, 2), Point(5, 9))
    assert after.bottom_left == Point(1 + dx, 2 + dy)
    assert (after.width, after.height, after.area) == (before.width, before.height, before.area)
    assert image.shape == canvasShape()
    assert image.any()


def test_run_logs_measurements(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="process"):
        run()
    assert any("before:" in message and "area=28" in message for message in caplog.messages)
    assert any("after:" in message for message in caplog.messages)


def test_main_writes_image(tmp_path) -> None:
    output = tmp_path / "rectangle.png"
    assert main(["--output", str(output)]) == 0
    assert output.exists()
    assert output.stat().st_size > 0
