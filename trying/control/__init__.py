from .guard import ensure, warn_unless
from .recover import downgrade, recover, recover_with

__all__ = (
    "downgrade",
    "ensure",
    "recover",
    "recover_with",
    "warn_unless",
)
