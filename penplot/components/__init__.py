"""Auto-register all component modules."""

from ..registry import auto_register_module
from . import cap_spacer, motor_mount, pencil_holder

auto_register_module(cap_spacer)
auto_register_module(motor_mount)
auto_register_module(pencil_holder)
