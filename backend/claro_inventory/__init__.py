"""Claro Inventory - serialized equipment, RMA and materials console backend."""

__version__ = "0.1.0"
