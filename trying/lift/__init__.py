"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from trying import lift as L   # Recommended
    from trying import lift        # Explicit

Architecture:
- L.up.*    - lifting values into WarnResult
- L.down.*  - narrowing WarnResult back out

Examples:
    from trying import lift as L

    # Lifting
    user = L.up.pure(User(id=42))
    clamped = L.up.warn(100, "clamped to 100")
    lifted = L.up.from_result(kungfu_result)
    found = L.up.optional(db.find(42), error=lambda: NotFound(42))

    # Narrowing
    binary = L.down.discard_warnings(clamped)
    binary = L.down.strict(clamped, warning_as_error=ValueError)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# Most common functions at the root
from .up import catching, fail, from_maybe, from_result, optional, pure, warn
from .down import discard_warnings, or_else, strict

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "warn",
    "fail",
    "from_result",
    "from_maybe",
    "optional",
    "catching",
    # Down
    "discard_warnings",
    "strict",
    "or_else",
)
