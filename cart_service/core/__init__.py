# Core modules

from .config import Settings, get_settings
from .errors import CartError, ValidationError, NotFoundError, BadRequestError
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "CartError",
    "ValidationError",
    "NotFoundError",
    "BadRequestError",
    "setup_logging",
]
