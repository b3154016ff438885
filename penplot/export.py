"""STL export through pythonopenscad's in-process manifold renderer."""

import logging
from pathlib import Path

from pythonopenscad.m3dapi import M3dRenderer, manifold_to_stl

from .errors import DegenerateGeometryError

logger = logging.getLogger(__name__)


def solid_manifold(model):
    """Render a pythonopenscad tree to its solid manifold.

    Shapes carrying the transparent (%) modifier render as shells and are
    not part of the solid.
    """
    return model.renderObj(M3dRenderer()).get_solid_manifold()


def export_stl(model, stl_path) -> Path:
    """Write the solid of a pythonopenscad tree to STL and return the path.

    Raises DegenerateGeometryError when the solid is empty or has no volume.
    """
    stl_path = Path(stl_path)
    manifold = solid_manifold(model)
    if manifold.is_empty() or manifold.volume() <= 0:
        raise DegenerateGeometryError(f"{stl_path.stem} has no solid volume")

    manifold_to_stl(manifold, filename=str(stl_path), update_normals=False)
    logger.info("Exported: %s", stl_path)
    return stl_path
