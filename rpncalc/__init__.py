"""Interactive reverse polish notation calculator, with string and path helpers."""

__version__ = "0.1.0"