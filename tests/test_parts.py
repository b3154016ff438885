"""Geometry construction tests: each part builds a CSG tree that serialises."""

import pytest

from penplot.assemblies.pen_holder import PenHolderAssembly
from penplot.components.cap_spacer import CapSpacer
from penplot.components.motor_mount import MotorMount
from penplot.components.pencil_holder import PencilHolder
from penplot.config import (
    CapSpacerDimensions,
    MotorMountDimensions,
    PencilHolderDimensions,
    PenHolderDimensions,
)
from penplot.errors import ConfigurationError
from penplot.vitamins.stepper import StepperMotor

PARTS = [MotorMount, PencilHolder, CapSpacer, StepperMotor, PenHolderAssembly]


class TestBuild:

    @pytest.mark.parametrize("part", PARTS)
    def test_builds_scad(self, part):
        scad = part().build().dumps()
        assert "cylinder(" in scad

    @pytest.mark.parametrize("part", PARTS)
    def test_rebuild_is_identical(self, part):
        assert part().build().dumps() == part().build().dumps()

    @pytest.mark.parametrize("part", PARTS)
    def test_facet_count_override(self, part):
        scad = part(fn=37).build().dumps()
        assert "$fn=37" in scad
        assert "$fn=64" not in scad

    def test_default_facet_count(self):
        assert "$fn=64" in CapSpacer().build().dumps()

    @pytest.mark.parametrize("part", PARTS)
    @pytest.mark.parametrize("fn", [2, 0, -5])
    def test_facet_count_override_rejected(self, part, fn):
        with pytest.raises(ConfigurationError, match="facet count"):
            part(fn=fn)

    def test_facet_count_from_dimensions(self):
        spacer = CapSpacer(CapSpacerDimensions(facet_count=24))
        assert "$fn=24" in spacer.build().dumps()

    def test_write_scad(self, tmp_path):
        path = tmp_path / "spacer.scad"
        CapSpacer().write_scad(str(path))
        assert path.read_text() == CapSpacer().build().dumps()


class TestMotorMount:

    def test_rotated_on_side(self):
        scad = MotorMount().build().dumps()
        assert "rotate(" in scad
        assert "difference()" in scad

    def test_invalid_dims_rejected_before_build(self):
        dims = MotorMountDimensions()
        dims.bore_diameter = 60.0
        with pytest.raises(ConfigurationError):
            MotorMount(dims).build()


class TestPencilHolder:

    def test_clip_is_plain_by_default(self):
        assert "%" not in PencilHolder().build().dumps()

    def test_preview_clip_marks_block(self):
        assert "%" in PencilHolder(preview_clip=True).build().dumps()

    def test_invalid_retention_hole(self):
        dims = PencilHolderDimensions()
        dims.retention_hole_diameter = dims.barrel_diameter
        with pytest.raises(ConfigurationError):
            PencilHolder(dims).build()


class TestCapSpacer:

    def test_invalid_bore_rejected_before_build(self):
        dims = CapSpacerDimensions()
        dims.cap_bore_diameter = 25
        dims.outer_diameter = 20
        with pytest.raises(ConfigurationError, match="cap_bore_diameter"):
            CapSpacer(dims).build()

    def test_three_cylinders(self):
        scad = CapSpacer().build().dumps()
        assert scad.count("cylinder(") == 3


class TestPenHolderAssembly:

    def test_contains_holder_and_mount(self):
        scad = PenHolderAssembly().build().dumps()
        assert "union()" in scad
        assert "rotate(" in scad

    def test_motor_only_in_preview(self):
        plain = PenHolderAssembly().build().dumps()
        preview = PenHolderAssembly(show_motor=True).build().dumps()
        assert len(preview) > len(plain)
        assert plain.count("cylinder(") == 4
        assert preview.count("cylinder(") == 6

    def test_preview_clip_flag(self):
        dims = PenHolderDimensions(preview_clip=True)
        assert "%" in PenHolderAssembly(dims).build().dumps()

    def test_invalid_holder_rejected(self):
        dims = PenHolderDimensions()
        dims.holder.wall_thickness = 0
        with pytest.raises(ConfigurationError):
            PenHolderAssembly(dims).build()
