"""
trying - outcome values that short-circuit on failure and remember warnings.

Core building blocks:
- WarnResult (Ok / Warn / Err): tri-state outcome, severity Err > Warn > Ok
- MaybeWarn (Clean / Warned): what keeps flowing when nothing failed
- propagate() + @propagating: early return of failures up the call chain
- collect / traverse / fold: batches of outcomes into one, warnings merged

Around them:
- lift: in and out of the tri-state world (kungfu Result, Optional, exceptions)
- control: recover, downgrade, ensure, warn_unless
- Early (Done / Todo): binary early-exit value
- Assert: checks that must be consumed, for tests
- report / run: outcome to exit status at the program boundary
"""

# Core types
from ._types import NoError, NoWarning, Predicate, Thunk

# Propagation protocol
from .protocol import (
    Break,
    Continue,
    ControlFlow,
    FromResidual,
    Propagable,
    branch,
    propagate,
    propagating,
)

# Outcome values
from . import warn
from .warn import (
    Clean,
    Diagnostics,
    Err,
    MaybeWarn,
    Ok,
    Severity,
    Warn,
    Warned,
    WarnResult,
)

# Collection operations
from .collection import collect, fold, traverse

# Lift helpers (namespace import preferred: from trying import lift as L)
from . import lift

# Control
from .control import downgrade, ensure, recover, recover_with, warn_unless

# Early return
from .early import Done, Early, Todo

# Assertions
from .assertion import Assert, AssertFailure, Location, checks, set_drop_handler

# Program boundary
from .report import ExitCode, ReportPolicy, report, run

# Errors
from ._errors import Propagation, ResidualMismatchError, WrongVariantError

__all__ = (
    # Types
    "NoError",
    "NoWarning",
    "Predicate",
    "Thunk",
    # Protocol
    "Break",
    "Continue",
    "ControlFlow",
    "FromResidual",
    "Propagable",
    "branch",
    "propagate",
    "propagating",
    # Outcome values
    "warn",
    "Clean",
    "Diagnostics",
    "Err",
    "MaybeWarn",
    "Ok",
    "Severity",
    "Warn",
    "Warned",
    "WarnResult",
    # Collection
    "collect",
    "fold",
    "traverse",
    # Lift module
    "lift",
    # Control
    "downgrade",
    "ensure",
    "recover",
    "recover_with",
    "warn_unless",
    # Early
    "Done",
    "Early",
    "Todo",
    # Assertions
    "Assert",
    "AssertFailure",
    "Location",
    "checks",
    "set_drop_handler",
    # Program boundary
    "ExitCode",
    "ReportPolicy",
    "report",
    "run",
    # Errors
    "Propagation",
    "ResidualMismatchError",
    "WrongVariantError",
)
