from .logging import setup_logger
from .serialization import JsonSerializer

__all__ = [
    "setup_logger",
    "JsonSerializer",
]
