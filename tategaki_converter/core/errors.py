"""Exception hierarchy for the vertical writing converter.

WHY: Callers need to tell a misbehaving tokenizer apart from a bad call
(empty column list) or a bad setting, without string-matching messages.

HOW: One base class, TategakiError, with a subclass per failure kind.
EmptyInputError and ConfigurationError also derive from ValueError so
code that already catches ValueError keeps working.

RULES:
- CollaboratorError wraps tokenizer failures; the original exception is
  chained via ``raise ... from exc``
- Nothing in the package retries or swallows these errors
"""


class TategakiError(Exception):
    """Base exception for all converter errors."""


class CollaboratorError(TategakiError):
    """Raised when the tokenizer fails or breaks its output contract."""


class EmptyInputError(TategakiError, ValueError):
    """Raised when transposition is asked to lay out zero lines."""


class ConfigurationError(TategakiError, ValueError):
    """Raised for invalid options, unknown registry keys, or bad settings."""
