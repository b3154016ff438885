"""G-code rendering and plot program tests."""

import logging

import pytest

from penplot.config import PlotterSettings
from penplot.gcode import (
    G_MODE,
    HOME,
    MOTORS_OFF,
    Comment,
    Message,
    Model,
    Move,
    Point,
    Printer,
    Raw,
    read_points,
    rescale,
)


class TestCodes:

    def test_message(self):
        assert str(Message("Hello")) == "M117 Hello"
        assert str(Message(f"{50.3:.1f}%")) == "M117 50.3%"

    def test_comment(self):
        assert str(Comment("hi")) == "; hi"

    def test_model(self):
        assert str(Model("MK3S")) == "M862.3 P MK3S ; printer model check"

    def test_raw(self):
        assert str(HOME) == "G28 W ; Home all without mesh bed level"
        assert str(MOTORS_OFF) == "M84 ; Disable motors"
        assert str(Raw("G4")) == "G4"

    @pytest.mark.parametrize(
        "point, expected",
        [
            (Point(x=0.0), "X0.0"),
            (Point(x=0.0, y=1.0), "X0.0 Y1.0"),
            (Point(x=0.0, y=1.0, z=2.0), "X0.0 Y1.0 Z2.0"),
            (Point(x=0.0, z=2.0), "X0.0 Z2.0"),
            (Point(z=2.0), "Z2.0"),
            (Point(y=1.0), "Y1.0"),
        ],
    )
    def test_move(self, point, expected):
        assert str(Move(point, 1000.0)) == f"G{G_MODE} {expected} F1000.0"

    def test_move_without_coordinates(self, caplog):
        with caplog.at_level(logging.WARNING, logger="penplot.gcode"):
            rendered = str(Move(Point(), 1000.0))
        assert rendered == "; [WARNING] Move without coordinates!"
        assert "without coordinates" in caplog.text


class TestRescale:

    def test_midpoint(self):
        assert rescale(50.0, 0.0, 100.0, 0.0, 200.0) == 100.0

    def test_offset_target(self):
        assert rescale(0.0, 0.0, 10.0, 5.0, 15.0) == 5.0


class TestPrinter:

    def test_bed_size(self):
        printer = Printer(PlotterSettings(bed_min=(0.0, 0.0), bed_max=(250.0, 210.0)))
        assert printer.width == 250.0
        assert printer.height == 210.0

    def test_draw_point(self):
        printer = Printer(PlotterSettings())
        printer.draw_point(10.0, 20.0)
        assert [str(c) for c in printer.codes] == [
            "; draw_point(10.0, 20.0)",
            "G0 X10.0 Y20.0 F1000.0",
            "G0 Z4.0 F400.0",
            "G0 Z6.5 F800.0",
        ]

    def test_draw_point_rescaled(self):
        settings = PlotterSettings(bed_max=(200.0, 100.0), scale=(20.0, 10.0))
        printer = Printer(settings)
        printer.draw_point(10.0, 5.0)
        assert str(printer.codes[1]) == "G0 X100.0 Y50.0 F1000.0"

    def test_program_layout(self):
        printer = Printer(PlotterSettings())
        printer.draw_points([(1.0, 2.0), (3.0, 4.0)])
        lines = list(printer.program())
        assert lines[0] == "; Start of generated code"
        assert lines[1] == "M862.3 P MK3S ; printer model check"
        assert lines[2].startswith("G21")
        assert lines[3].startswith("G90")
        assert lines[4].startswith("G28 W")
        assert lines[5] == "G0 X0.0 Y0.0 Z6.5 F1000.0"
        assert lines[6].startswith("G92 X0 Y0")
        assert lines[7] == "M117 0.0%"
        assert lines[-3] == "; Lift the head up before turning off"
        assert lines[-2] == "G0 Z80.0 F1000.0"
        assert lines[-1].startswith("M84")
        assert len(lines) == 8 + 2 * 4 + 3

    def test_program_without_model(self):
        printer = Printer(PlotterSettings(model=None))
        lines = list(printer.program())
        assert not any(line.startswith("M862.3") for line in lines)

    def test_save(self, tmp_path):
        printer = Printer(PlotterSettings())
        printer.draw_point(1.0, 1.0)
        path = printer.save(tmp_path / "out.gcode")
        text = path.read_text()
        assert text.endswith("\n")
        assert text.splitlines() == list(printer.program())


class TestReadPoints:

    def test_reads_pairs(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("# dots\n1 2\n\n3.5 4.25  # last\n")
        assert read_points(path) == [(1.0, 2.0), (3.5, 4.25)]

    def test_bad_line(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("1 2 3\n")
        with pytest.raises(ValueError, match=":1:"):
            read_points(path)

    def test_non_numeric_line(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("1 2\nx 4\n")
        with pytest.raises(ValueError, match=r"points.txt:2: non-numeric"):
            read_points(path)
