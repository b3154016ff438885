"""Shared parametric dimensions for the pen plotter parts.

Central config hub -- every part derives geometry from these dimensions.
Uses @dataclass with derived @property methods for computed values, so
changing a base dimension propagates to everything computed from it.
Each record validates itself on construction; builders validate again
right before emitting geometry.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError

# Default number of segments used to approximate every circle ($fn).
FACET_COUNT = 64

PEN_DIAMETER = 11.5
PENCIL_DIAMETER = 7.5


def _require_positive(record, *names):
    for name in names:
        value = getattr(record, name)
        if value is None or value <= 0:
            raise ConfigurationError(
                f"{type(record).__name__}.{name} must be positive, got {value!r}"
            )


def _require_facets(record):
    if record.facet_count < 3:
        raise ConfigurationError(
            f"{type(record).__name__}.facet_count must be at least 3, "
            f"got {record.facet_count!r}"
        )


def check_facet_count(fn: int) -> int:
    """Reject facet counts that cannot approximate a circle."""
    if fn < 3:
        raise ConfigurationError(f"facet count must be at least 3, got {fn!r}")
    return fn


def resolve_facet_count(fn: Optional[int], dims) -> int:
    """Builder override if given, otherwise the record's facet_count."""
    return check_facet_count(fn if fn is not None else dims.facet_count)


def _require_less(record, small: str, large: str):
    small_value = getattr(record, small)
    large_value = getattr(record, large)
    if small_value >= large_value:
        raise ConfigurationError(
            f"{type(record).__name__}.{small} ({small_value}) must be smaller "
            f"than {large} ({large_value})"
        )


@dataclass
class MotorMountDimensions:
    """Walled pocket that holds a NEMA-17 stepper by its face."""
    motor_face_size: float = 42.3
    bore_diameter: float = 22.5  # clears the motor's centring boss
    pin_slot_width: float = 5.5
    wall_thickness: float = 1.5
    mount_depth: float = 12.0
    facet_count: int = FACET_COUNT

    def __post_init__(self):
        self.validate()

    def validate(self):
        _require_positive(
            self, "motor_face_size", "bore_diameter", "pin_slot_width",
            "wall_thickness", "mount_depth",
        )
        _require_facets(self)
        _require_less(self, "bore_diameter", "motor_face_size")
        _require_less(self, "pin_slot_width", "motor_face_size")
        _require_less(self, "wall_thickness", "mount_depth")

    @property
    def outer_size(self) -> float:
        """Outer footprint of the mount block (motor face + wall each side)."""
        return self.motor_face_size + 2 * self.wall_thickness

    @property
    def cavity_offset(self) -> Tuple[float, float, float]:
        """Corner of the motor cavity inside the outer block."""
        t = self.wall_thickness
        return (t, t, t)

    @property
    def face_centre(self) -> float:
        """Centre of the motor face, on both in-plane axes."""
        return self.outer_size / 2

    @property
    def pin_slot_length(self) -> float:
        """Pin slot runs from just past the near wall out through the far face."""
        return self.outer_size - self.wall_thickness


@dataclass
class PencilHolderDimensions:
    """Barrel clamp that carries the pen (or pencil)."""
    barrel_diameter: float = PEN_DIAMETER
    wall_thickness: float = 4.0
    holder_height: float = 20.0
    retention_hole_diameter: float = 3.0
    # None means "wall + barrel", enough to cross the whole barrel.
    retention_hole_length: Optional[float] = None
    facet_count: int = FACET_COUNT

    def __post_init__(self):
        self.validate()

    def validate(self):
        _require_positive(
            self, "barrel_diameter", "wall_thickness", "holder_height",
            "retention_hole_diameter",
        )
        if self.retention_hole_length is not None:
            _require_positive(self, "retention_hole_length")
        _require_facets(self)
        _require_less(self, "retention_hole_diameter", "barrel_diameter")
        if self.retention_bore_length <= self.outer_diameter / 2:
            raise ConfigurationError(
                f"retention bore length ({self.retention_bore_length}) does not "
                f"reach through the wall (outer radius {self.outer_diameter / 2})"
            )

    @property
    def outer_diameter(self) -> float:
        """Outer diameter of the holder barrel."""
        return self.barrel_diameter + 2 * self.wall_thickness

    @property
    def clip_width(self) -> float:
        return self.outer_diameter

    @property
    def clip_depth(self) -> float:
        """How far the flat clip block reaches from the barrel axis."""
        return self.barrel_diameter + self.wall_thickness

    @property
    def bore_base(self) -> float:
        """Through-bore starts below the base so the cut is clean."""
        return -self.wall_thickness

    @property
    def bore_height(self) -> float:
        return self.holder_height + 2 * self.wall_thickness

    @property
    def retention_bore_length(self) -> float:
        if self.retention_hole_length is not None:
            return self.retention_hole_length
        return self.wall_thickness + self.barrel_diameter

    @property
    def retention_bore_height(self) -> float:
        """Retention pin crosses the barrel at mid-height."""
        return self.holder_height / 2


@dataclass
class PenHolderDimensions:
    """Aggregated dimensions for the holder + motor mount assembly."""
    holder: PencilHolderDimensions = None
    mount: MotorMountDimensions = None
    # Render the clip block with the transparent (%) modifier.
    preview_clip: bool = False

    def __post_init__(self):
        if self.holder is None:
            self.holder = PencilHolderDimensions()
        if self.mount is None:
            self.mount = MotorMountDimensions()

    def validate(self):
        self.holder.validate()
        self.mount.validate()

    @property
    def mount_offset(self) -> Tuple[float, float, float]:
        """Mount sits against the far face of the clip block."""
        return (
            -self.mount.mount_depth / 2,
            self.holder.barrel_diameter + self.holder.wall_thickness,
            0.0,
        )


@dataclass
class CapSpacerDimensions:
    """Stepped bushing: pen cap below, pen shaft above."""
    outer_diameter: float = 20.0
    cap_bore_diameter: float = 9.5
    cap_bore_depth: float = 6.5
    shaft_bore_diameter: float = 11.5
    shaft_bore_depth: float = 8.5
    facet_count: int = FACET_COUNT

    def __post_init__(self):
        self.validate()

    def validate(self):
        _require_positive(
            self, "outer_diameter", "cap_bore_diameter", "cap_bore_depth",
            "shaft_bore_diameter", "shaft_bore_depth",
        )
        _require_facets(self)
        _require_less(self, "cap_bore_diameter", "outer_diameter")
        _require_less(self, "shaft_bore_diameter", "outer_diameter")

    @property
    def total_height(self) -> float:
        return self.cap_bore_depth + self.shaft_bore_depth

    @property
    def step_height(self) -> float:
        """Height where the cap bore ends and the shaft bore begins."""
        return self.cap_bore_depth


@dataclass
class StepperMotorDimensions:
    """NEMA-17 stepper (vitamin mockup, never printed)."""
    face_size: float = 42.3
    body_length: float = 40.0
    boss_diameter: float = 22.0
    boss_height: float = 2.0
    shaft_diameter: float = 5.0
    shaft_length: float = 24.0
    facet_count: int = FACET_COUNT

    def __post_init__(self):
        self.validate()

    def validate(self):
        _require_positive(
            self, "face_size", "body_length", "boss_diameter", "boss_height",
            "shaft_diameter", "shaft_length",
        )
        _require_facets(self)
        _require_less(self, "boss_diameter", "face_size")
        _require_less(self, "shaft_diameter", "boss_diameter")


@dataclass
class PlotterSettings:
    """Printer settings used when plotting with the mounted pen."""
    model: Optional[str] = "MK3S"
    bed_min: Tuple[float, float] = (0.0, 0.0)
    bed_max: Tuple[float, float] = (200.0, 200.0)
    # Source drawing size; points are rescaled onto the bed when set.
    scale: Optional[Tuple[float, float]] = None
    z_travel: float = 6.5
    z_plunge: float = 4.0
    move_speed: float = 1000.0
    plunge_speed: float = 400.0
    retract_speed: float = 800.0

    def __post_init__(self):
        self.validate()

    def validate(self):
        _require_positive(self, "move_speed", "plunge_speed", "retract_speed")
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"bed_max {self.bed_max} must exceed bed_min {self.bed_min}"
            )
        if self.scale is not None and min(self.scale) <= 0:
            raise ConfigurationError(f"scale must be positive, got {self.scale!r}")
        _require_less(self, "z_plunge", "z_travel")

    @property
    def width(self) -> float:
        return self.bed_max[0] - self.bed_min[0]

    @property
    def height(self) -> float:
        return self.bed_max[1] - self.bed_min[1]


# Default dimensions
MOUNT = MotorMountDimensions()
HOLDER = PencilHolderDimensions()
DIMS = PenHolderDimensions(holder=HOLDER, mount=MOUNT)
SPACER = CapSpacerDimensions()
MOTOR = StepperMotorDimensions()
PLOTTER = PlotterSettings()
