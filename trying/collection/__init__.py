from .fold import fold
from .traverse import collect, traverse

__all__ = (
    "collect",
    "fold",
    "traverse",
)
