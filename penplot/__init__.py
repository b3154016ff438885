"""Printable parts and G-code tooling for an FDM pen plotter."""

__version__ = "0.1.0"
