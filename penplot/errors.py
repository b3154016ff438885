"""Error types raised by penplot parts, the plotter and the STL exporter."""


class PenplotError(Exception):
    """Base class for all penplot errors."""


class ConfigurationError(PenplotError, ValueError):
    """A dimension record violates one of its invariants."""


class DegenerateGeometryError(PenplotError):
    """The geometry kernel failed or produced an empty mesh."""
