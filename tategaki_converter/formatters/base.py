"""Abstract base formatter and output container.

WHY: Every output format consumes the same VerticalText results but
produces different file content. This base class enforces a consistent
interface so the CLI and library callers can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` receives every converted sentence at once and returns a
  list (one item for the built-in formatters)
- ``suffix`` starts with a hyphen, e.g. ``"-vertical.txt"``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tategaki_converter.core.ir import VerticalText


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-vertical.txt"`` → ``"poem-vertical.txt"``.
        content: The file content as text (written as UTF-8).
        media_type: MIME type for the content, e.g. ``"text/plain"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def format(self, results: list[VerticalText]) -> list[FormatterOutput]:
        """Convert finished conversions into one or more output files.

        Args:
            results: One VerticalText per input sentence, in input order.

        Returns:
            List of FormatterOutput objects.
        """
