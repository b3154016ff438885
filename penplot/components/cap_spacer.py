"""Pen cap spacer.

Stepped bushing: the pen cap pushes into the lower bore, the pen shaft
into the upper one. The two bores meet at step_height with no wall between.
"""

from typing import Optional

import pythonopenscad as poscad

from ..config import SPACER, CapSpacerDimensions, resolve_facet_count


class CapSpacer:
    """A stepped cylindrical bushing."""

    def __init__(
        self,
        dims: CapSpacerDimensions = SPACER,
        fn: Optional[int] = None,
    ):
        self.dims = dims
        self.fn = resolve_facet_count(fn, dims)

    def build(self):
        self.dims.validate()
        d = self.dims
        return poscad.Difference()(
            poscad.Cylinder(h=d.total_height, d=d.outer_diameter, _fn=self.fn),
            poscad.Cylinder(h=d.cap_bore_depth, d=d.cap_bore_diameter, _fn=self.fn),
            poscad.Translate([0, 0, d.step_height])(
                poscad.Cylinder(
                    h=d.shaft_bore_depth, d=d.shaft_bore_diameter, _fn=self.fn
                )
            ),
        )

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())


if __name__ == "__main__":
    print(CapSpacer().build().dumps())
