"""Pen holder assembly -- holder body at the origin, motor mount beside it.

The mount is shifted by mount_offset so it sits against the far face of
the holder's clip block without overlapping the barrel.
Supports a `show_motor` parameter for preview variants.
"""

from typing import Optional

import pythonopenscad as poscad

from ..config import (
    DIMS,
    PENCIL_DIAMETER,
    PenHolderDimensions,
    PencilHolderDimensions,
    check_facet_count,
)
from ..registry import register_part
from ..components.motor_mount import MotorMount
from ..components.pencil_holder import PencilHolder
from ..vitamins.stepper import StepperMotor


class PenHolderAssembly:
    """Complete pen holder with stepper motor mount."""

    def __init__(
        self,
        dims: PenHolderDimensions = DIMS,
        fn: Optional[int] = None,
        show_motor: bool = False,
    ):
        self.dims = dims
        self.fn = check_facet_count(fn) if fn is not None else None
        self.show_motor = show_motor

    def build(self):
        self.dims.validate()
        holder = PencilHolder(
            self.dims.holder, fn=self.fn, preview_clip=self.dims.preview_clip
        )
        mount = MotorMount(self.dims.mount, fn=self.fn)

        mount_parts = [mount.build()]
        if self.show_motor:
            # Motor face rests on the inside of the mount's near wall.
            motor = StepperMotor(fn=self.fn)
            mount_parts.append(
                mount.orient(
                    poscad.Translate(list(self.dims.mount.cavity_offset))(motor.build())
                )
            )

        return poscad.Union()(
            holder.build(),
            poscad.Translate(list(self.dims.mount_offset))(*mount_parts),
        )

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())


@register_part("pencil-holder-assembly", part_type="assembly")
def pencil_holder_assembly(**kwargs):
    """Factory for the pencil-sized variant."""
    dims = PenHolderDimensions(
        holder=PencilHolderDimensions(barrel_diameter=PENCIL_DIAMETER)
    )
    return PenHolderAssembly(dims=dims, **kwargs)


@register_part("pen-holder-assembly-preview", part_type="preview")
def pen_holder_assembly_preview(**kwargs):
    """Factory for the preview variant with the motor seated."""
    return PenHolderAssembly(show_motor=True, **kwargs)
