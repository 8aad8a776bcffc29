# topmark:header:start
#
#   project      : TermFmt
#   file         : errors.py
#   file_relpath : src/termfmt/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TermFmt formatting-state manager.

Usage:
    Contract violations (unbalanced pops, out-of-order guard releases) are
    programming errors. They are raised as distinct exception types so that
    callers and tests can tell them apart from ordinary I/O failures raised by
    the underlying stream, which TermFmt never catches.
"""

from __future__ import annotations


class TermfmtError(Exception):
    """Base class for all TermFmt library errors."""


class ContractViolationError(TermfmtError, RuntimeError):
    """A push/pop or guard operation broke the stack discipline."""


class GuardStateError(ContractViolationError):
    """A `FormatGuard` was used after it gave up ownership of its push."""


class UnsupportedStreamError(TermfmtError, TypeError):
    """The stream cannot carry a teardown hook and was not explicitly attached."""


class WidthRangeError(TermfmtError, ValueError):
    """A width override outside ``1..MAX_WIDTH`` was requested."""


class ConfigError(TermfmtError):
    """Configuration input is missing, unreadable, or malformed."""


class UnknownModifierError(TermfmtError, LookupError):
    """No modifier with the requested name exists in the catalogue."""
