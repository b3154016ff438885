"""Pen / pencil holder body.

Round barrel clamp with a flat clip block on one side (+Y), a through-bore
for the barrel and a retention pin hole crossing it at mid-height.
"""

from typing import Optional

import pythonopenscad as poscad

from ..config import (
    HOLDER,
    PENCIL_DIAMETER,
    PencilHolderDimensions,
    resolve_facet_count,
)
from ..registry import register_part


class PencilHolder:
    """Barrel clamp sized for a pen by default."""

    def __init__(
        self,
        dims: PencilHolderDimensions = HOLDER,
        fn: Optional[int] = None,
        preview_clip: bool = False,
    ):
        self.dims = dims
        self.fn = resolve_facet_count(fn, dims)
        self.preview_clip = preview_clip

    def build(self):
        self.dims.validate()
        d = self.dims

        barrel = poscad.Cylinder(h=d.holder_height, d=d.outer_diameter, _fn=self.fn)
        clip = poscad.Cube([d.clip_width, d.clip_depth, d.holder_height])
        if self.preview_clip:
            clip.add_modifier(poscad.TRANSPARENT)
        clip = poscad.Translate([-d.clip_width / 2, 0, 0])(clip)

        # Overshoots both ends so the cut is clean at the open end.
        through_bore = poscad.Translate([0, 0, d.bore_base])(
            poscad.Cylinder(h=d.bore_height, d=d.barrel_diameter, _fn=self.fn)
        )
        retention_bore = poscad.Translate([0, 0, d.retention_bore_height])(
            poscad.Rotate([90, 0, 0])(
                poscad.Cylinder(
                    h=d.retention_bore_length,
                    d=d.retention_hole_diameter,
                    _fn=self.fn,
                )
            )
        )
        return poscad.Difference()(
            poscad.Union()(barrel, clip),
            through_bore,
            retention_bore,
        )

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())


@register_part("pencil-holder-for-pencil")
def pencil_holder_for_pencil(**kwargs):
    """Factory for the pencil-sized holder."""
    return PencilHolder(
        dims=PencilHolderDimensions(barrel_diameter=PENCIL_DIAMETER), **kwargs
    )


if __name__ == "__main__":
    print(PencilHolder().build().dumps())
