from . import aff

__all__ = [
    "aff"
]
