"""Auto-register assembly modules."""

from ..registry import auto_register_module
from . import pen_holder

auto_register_module(pen_holder, part_type="assembly")
