"""
Warn
====

Outcome values that remember their warnings:
- MaybeWarn (Clean / Warned): "succeeded, maybe with a diagnostic"
- WarnResult (Ok / Warn / Err): success, success with a diagnostic, failure
- Diagnostics: order-preserving container of gathered warnings

Built on top of kungfu result patterns.
"""

from .diagnostics import Diagnostics
from .maybe import Clean, MaybeWarn, Warned
from .result import Err, Ok, Severity, Warn, WarnResult

__all__ = (
    "Diagnostics",
    "Clean",
    "MaybeWarn",
    "Warned",
    "Err",
    "Ok",
    "Severity",
    "Warn",
    "WarnResult",
)
