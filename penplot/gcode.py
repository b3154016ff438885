"""G-code generation for plotting with the pen held in the printed holder.

The printer head carries the pen; each point is drawn as a dot: travel to
XY, plunge to z_plunge, retract to z_travel.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import PLOTTER, PlotterSettings

logger = logging.getLogger(__name__)

G_MODE = 0
Z_RESET = 80.0


def rescale(m: float, rmin: float, rmax: float, tmin: float, tmax: float) -> float:
    """Map m from [rmin, rmax] onto [tmin, tmax]."""
    return ((m - rmin) / (rmax - rmin)) * (tmax - tmin) + tmin


def _coord(axis: str, value: Optional[float]) -> str:
    if value is None:
        return ""
    return f"{axis}{value:.1f}"


@dataclass(frozen=True)
class Point:
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None

    def __str__(self):
        parts = [_coord("X", self.x), _coord("Y", self.y), _coord("Z", self.z)]
        return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class Comment:
    text: str

    def __str__(self):
        return f"; {self.text}"


@dataclass(frozen=True)
class Model:
    """Printer model check; the firmware refuses mismatched programs."""
    name: str

    def __str__(self):
        return f"M862.3 P {self.name} ; printer model check"


@dataclass(frozen=True)
class Message:
    """Text shown on the printer display."""
    text: str

    def __str__(self):
        return f"M117 {self.text}"


@dataclass(frozen=True)
class Move:
    point: Point
    feed: float

    def __str__(self):
        coords = str(self.point)
        if not coords:
            logger.warning("Move without coordinates at feed %.1f", self.feed)
            return str(Comment("[WARNING] Move without coordinates!"))
        return f"G{G_MODE} {coords} F{self.feed:.1f}"


@dataclass(frozen=True)
class Raw:
    code: str
    comment: Optional[str] = None

    def __str__(self):
        if self.comment:
            return f"{self.code} ; {self.comment}"
        return self.code


HOME = Raw("G28 W", "Home all without mesh bed level")
UNITS_MM = Raw("G21", "Set units to millimeters")
ABS_COORD = Raw("G90", "Use absolute coordinates")
SET_ORIGIN = Raw("G92 X0 Y0", "Set current position to origin")
MOTORS_OFF = Raw("M84", "Disable motors")


class Printer:
    """Accumulates plot moves and writes a complete printer program."""

    def __init__(self, settings: PlotterSettings = PLOTTER):
        settings.validate()
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.codes: List[object] = []

    def draw_point(self, xp: float, yp: float):
        s = self.settings
        if s.scale is not None:
            source_w, source_h = s.scale
            x = rescale(xp, 0.0, source_w, 0.0, self.width)
            y = rescale(yp, 0.0, source_h, 0.0, self.height)
        else:
            x, y = xp, yp

        self.codes.append(Comment(f"draw_point({xp:.1f}, {yp:.1f})"))
        self.codes.append(Move(Point(x=x, y=y), s.move_speed))
        self.codes.append(Move(Point(z=s.z_plunge), s.plunge_speed))
        self.codes.append(Move(Point(z=s.z_travel), s.retract_speed))

    def draw_points(self, points: Iterable[Tuple[float, float]]):
        for x, y in points:
            self.draw_point(x, y)

    def header(self) -> List[object]:
        s = self.settings
        codes = [Comment("Start of generated code")]
        if s.model:
            codes.append(Model(s.model))
        codes += [
            UNITS_MM,
            ABS_COORD,
            HOME,
            Move(Point(x=s.bed_min[0], y=s.bed_min[1], z=s.z_travel), s.move_speed),
            SET_ORIGIN,
            Message("0.0%"),
        ]
        return codes

    def footer(self) -> List[object]:
        return [
            Comment("Lift the head up before turning off"),
            Move(Point(z=Z_RESET), self.settings.move_speed),
            MOTORS_OFF,
        ]

    def program(self) -> Iterator[str]:
        for code in self.header():
            yield str(code)
        for code in self.codes:
            yield str(code)
        for code in self.footer():
            yield str(code)

    def save(self, path) -> Path:
        path = Path(path)
        with open(path, "w") as f:
            for line in self.program():
                f.write(line)
                f.write("\n")
        logger.info("Wrote %d plot moves to %s", len(self.codes), path)
        return path


def read_points(path) -> List[Tuple[float, float]]:
    """Read whitespace separated "x y" pairs, one per line; '#' starts a comment."""
    points = []
    with open(path) as f:
        for lineno, line in enumerate(f, 1):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            fields = line.split()
            if len(fields) != 2:
                raise ValueError(f"{path}:{lineno}: expected 'x y', got {line!r}")
            try:
                points.append((float(fields[0]), float(fields[1])))
            except ValueError:
                raise ValueError(f"{path}:{lineno}: non-numeric point {line!r}") from None
    return points
