# Storage modules

from .cart import CartEngine

__all__ = ["CartEngine"]
