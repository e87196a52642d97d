"""A container of comparable items with several traversal orders, and a demo."""

__version__ = "0.1.0"
__all__ = ["container", "orders", "demo"]