"""Configuration constants, environment defaults, and .env loading.

WHY: Separator strings, writing direction, and tokenizer settings are the
knobs users reach for most often. Keeping them in one module as plain
constants (overridable through environment variables) means the CLI, the
library API, and the tests all agree on the same defaults.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level. The load_*() functions read the environment at call time
(not import time) so tests can monkeypatch variables, and they turn raw
strings into validated values.

RULES:
- FULL_WIDTH_SPACE (U+3000) is both the field delimiter and the padding
  character; it is not configurable
- Every TATEGAKI_* variable is optional; unset means the built-in default
- Separator values accept backslash escapes ("\\n", "\\u3000") so they can
  be written in .env files and shell arguments
- Invalid values raise ConfigurationError, never fall back silently
"""

from __future__ import annotations

import codecs
import os
import re

from dotenv import load_dotenv

from tategaki_converter.core.errors import ConfigurationError
from tategaki_converter.core.ir import (
    DEFAULT_ROW_TERMINATOR,
    FULL_WIDTH_SPACE,
    Direction,
    VerticalOptions,
)

# Load .env from the working directory (where the CLI is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Tokenizer defaults
# ---------------------------------------------------------------------------

DEFAULT_TOKENIZER = "sudachi"
DEFAULT_SPLIT_MODE = "C"
DEFAULT_BOUNDARY_LABELS: tuple[str, ...] = ("助詞",)
"""Part-of-speech labels that end a phrase (Japanese particles)."""

BOUNDARY_MATCH_MODES = ("substring", "exact")


_ESCAPE_RE = re.compile(
    r"(?P<escape>\\(?:U[0-9A-Fa-f]{8}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}"
    r"|N\{[A-Za-z0-9 \-]+\}|[0-7]{1,3}|[\\'\"abfnrtv]))"
    r"|(?P<malformed>\\[xuUN])"
)


def decode_escapes(value: str) -> str:
    """Turn backslash escapes in a configuration string into characters.

    WHY: A literal newline or ideographic space is awkward to type into a
    shell argument or a .env file. Users write "\\n" or "\\u3000" instead.

    HOW: Finds each Python-style escape ("\\n", "\\t", "\\\\", "\\x41",
    "\\u3000", "\\N{...}", octal) with a regex and decodes just that
    token with the ``unicode_escape`` codec. Text between escapes is
    copied as-is, so non-ASCII characters such as "｜" are never touched.

    RULES:
    - Strings without a backslash are returned unchanged
    - A backslash that starts no known escape is kept literally ("\\｜")
    - Truncated \\x, \\u, \\U and \\N escapes raise ConfigurationError
    """
    if "\\" not in value:
        return value

    def _decode(match: re.Match) -> str:
        if match.group("malformed"):
            raise ConfigurationError(
                "Invalid escape sequence {!r} in {!r}".format(
                    match.group("malformed"), value
                )
            )
        token = match.group("escape")
        try:
            return codecs.decode(token.encode("ascii"), "unicode_escape")
        except UnicodeDecodeError as exc:
            raise ConfigurationError(
                "Invalid escape sequence {!r} in {!r}: {}".format(token, value, exc)
            ) from exc

    return _ESCAPE_RE.sub(_decode, value)


def _env(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    return value


def load_options() -> VerticalOptions:
    """Build the default VerticalOptions from the environment.

    WHY: The CLI and VerticalWriter need a starting configuration that
    users can adjust without code changes.

    HOW: Reads TATEGAKI_DIRECTION, TATEGAKI_COLUMN_SEPARATOR,
    TATEGAKI_CHAR_SEPARATOR and TATEGAKI_ROW_TERMINATOR, decodes escapes,
    and lets VerticalOptions validate the result.

    RULES:
    - Unset variables use the VerticalOptions defaults
    - An empty TATEGAKI_COLUMN_SEPARATOR is allowed (no separator)
    - Unknown direction values raise ConfigurationError
    """
    defaults = VerticalOptions()
    direction = _env("TATEGAKI_DIRECTION", defaults.direction.value)
    column_separator = _env("TATEGAKI_COLUMN_SEPARATOR", defaults.column_separator)
    char_separator = _env("TATEGAKI_CHAR_SEPARATOR", defaults.char_separator)
    row_terminator = _env("TATEGAKI_ROW_TERMINATOR", defaults.row_terminator)

    return VerticalOptions(
        direction=Direction.parse(direction.strip()),
        column_separator=decode_escapes(column_separator),
        char_separator=decode_escapes(char_separator),
        row_terminator=decode_escapes(row_terminator),
    )


def load_tokenizer_name() -> str:
    """Return the registry key of the tokenizer to use."""
    return (_env("TATEGAKI_TOKENIZER", DEFAULT_TOKENIZER) or DEFAULT_TOKENIZER).strip()


def load_split_mode() -> str:
    """Return the Sudachi split mode ("A", "B" or "C")."""
    mode = (_env("TATEGAKI_SUDACHI_SPLIT_MODE", DEFAULT_SPLIT_MODE) or "").strip().upper()
    if mode not in ("A", "B", "C"):
        raise ConfigurationError(
            "TATEGAKI_SUDACHI_SPLIT_MODE must be A, B or C, got {!r}".format(mode)
        )
    return mode


def load_sudachi_dict() -> str | None:
    """Return the Sudachi dictionary name, or None for the SudachiPy default."""
    value = (_env("TATEGAKI_SUDACHI_DICT", "") or "").strip()
    return value or None


def load_boundary_labels() -> tuple[str, ...]:
    """Parse TATEGAKI_BOUNDARY_POS into a tuple of part-of-speech labels.

    RULES:
    - Comma-separated; surrounding whitespace is stripped
    - Empty entries are ignored
    - An entirely empty list raises ConfigurationError
    """
    raw = _env("TATEGAKI_BOUNDARY_POS", None)
    if raw is None:
        return DEFAULT_BOUNDARY_LABELS
    labels = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not labels:
        raise ConfigurationError("TATEGAKI_BOUNDARY_POS must name at least one label")
    return labels


def load_boundary_match() -> str:
    """Return the boundary match mode ("substring" or "exact")."""
    mode = (_env("TATEGAKI_BOUNDARY_MATCH", "substring") or "").strip().lower()
    if mode not in BOUNDARY_MATCH_MODES:
        raise ConfigurationError(
            "TATEGAKI_BOUNDARY_MATCH must be one of {}, got {!r}".format(
                ", ".join(BOUNDARY_MATCH_MODES), mode
            )
        )
    return mode
