# API Routes

from .cart import router as cart_router, get_cart_engine

__all__ = ["cart_router", "get_cart_engine"]
