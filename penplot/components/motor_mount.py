"""Stepper motor mount.

A walled pocket for the motor face with a bore for the centring boss and
a pin slot running out through the far wall. The finished mount is turned
on its side (rotate [90, 0, 90]) so the bore axis faces along +X.
"""

from typing import Optional

import pythonopenscad as poscad

from ..config import MOUNT, MotorMountDimensions, resolve_facet_count

ORIENTATION = [90, 0, 90]


class MotorMount:
    """A parametric NEMA-17 motor mount."""

    def __init__(
        self,
        dims: MotorMountDimensions = MOUNT,
        fn: Optional[int] = None,
    ):
        self.dims = dims
        self.fn = resolve_facet_count(fn, dims)

    def orient(self, *children):
        """Apply the mount's orientation to shapes given in mount coordinates."""
        return poscad.Rotate(ORIENTATION)(*children)

    def build(self):
        self.dims.validate()
        d = self.dims
        outer = d.outer_size
        centre = d.face_centre

        body = poscad.Cube([outer, outer, d.mount_depth])
        # Wall of thickness t on the near face; the far face is left open.
        cavity = poscad.Translate(list(d.cavity_offset))(
            poscad.Cube([d.motor_face_size, d.motor_face_size, d.mount_depth])
        )
        bore = poscad.Translate([centre, centre, 0])(
            poscad.Cylinder(h=d.mount_depth, d=d.bore_diameter, _fn=self.fn)
        )
        pin_slot = poscad.Translate([centre - d.pin_slot_width / 2, d.wall_thickness, 0])(
            poscad.Cube([d.pin_slot_width, d.pin_slot_length, d.mount_depth])
        )
        return self.orient(poscad.Difference()(body, cavity, bore, pin_slot))

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())


if __name__ == "__main__":
    print(MotorMount().build().dumps())
