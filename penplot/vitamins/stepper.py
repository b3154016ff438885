"""Stepper motor vitamin -- NEMA-17 mockup seated in the motor mount.

Body stands on its mounting face at z = 0; boss and shaft point down -Z
from the face centre, matching the mount's cavity coordinates.
"""

from typing import Optional

import pythonopenscad as poscad

from ..config import MOTOR, StepperMotorDimensions, resolve_facet_count


class StepperMotor:
    """NEMA-17 stepper mockup vitamin."""

    def __init__(
        self,
        dims: StepperMotorDimensions = MOTOR,
        fn: Optional[int] = None,
    ):
        self.dims = dims
        self.fn = resolve_facet_count(fn, dims)

    def build(self):
        self.dims.validate()
        d = self.dims
        centre = d.face_size / 2

        body = poscad.Cube([d.face_size, d.face_size, d.body_length])
        boss = poscad.Translate([centre, centre, -d.boss_height])(
            poscad.Cylinder(h=d.boss_height, d=d.boss_diameter, _fn=self.fn)
        )
        shaft = poscad.Translate([centre, centre, -d.shaft_length])(
            poscad.Cylinder(h=d.shaft_length, d=d.shaft_diameter, _fn=self.fn)
        )
        return poscad.Union()(body, boss, shaft)

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())
