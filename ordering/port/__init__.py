from . import clock, inventory

__all__ = ["clock", "inventory"]
