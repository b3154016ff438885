"""Auto-register vitamin (bought-in, non-printed) parts."""

from ..registry import auto_register_module
from . import stepper

auto_register_module(stepper, part_type="vitamin")
