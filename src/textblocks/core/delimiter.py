# delimiter.py
# SPDX-License-Identifier: MIT
"""Block delimiter specification and resolution.

A delimiter is either an explicit literal chosen by the caller or the
automatic mode, which picks a blank line in whichever line-ending
convention the text uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "AUTO",
    "CRLF",
    "LF",
    "Delimiter",
    "DelimiterLike",
    "resolve_delimiter",
]

LF = "\n"
CRLF = "\r\n"


@dataclass(frozen=True, slots=True)
class Delimiter:
    """Delimiter specification.

    Attributes:
        value (str | None): The literal delimiter, or None for automatic
            detection. An explicit empty string is kept as-is; it is the
            splitter that rejects it.
    """

    value: Optional[str] = None

    @classmethod
    def auto(cls) -> "Delimiter":
        return cls(None)

    @classmethod
    def literal(cls, value: str) -> "Delimiter":
        if not isinstance(value, str):
            raise TypeError(f"Delimiter literal must be a str; got {type(value).__name__}.")
        return cls(value)

    @property
    def is_auto(self) -> bool:
        return self.value is None

    @classmethod
    def coerce(cls, spec: "DelimiterLike") -> "Delimiter":
        """Normalize ``None``, a plain string, or a Delimiter into a Delimiter."""
        if spec is None:
            return AUTO
        if isinstance(spec, Delimiter):
            return spec
        if isinstance(spec, str):
            return cls(spec)
        raise TypeError(
            f"delimiter must be None, a str, or a Delimiter; got {type(spec).__name__}."
        )

    def resolve(self, text: str) -> str:
        """Return the concrete delimiter string to use for ``text``."""
        if self.value is not None:
            return self.value
        newline = CRLF if CRLF in text else LF
        return newline * 2


AUTO = Delimiter.auto()

DelimiterLike = Union[Delimiter, str, None]


def resolve_delimiter(text: str, delimiter: DelimiterLike = None) -> str:
    """Resolve a delimiter specification against ``text``.

    Explicit literals come back unchanged. In automatic mode the result is
    ``"\\r\\n\\r\\n"`` when a CRLF pair appears anywhere in the text and
    ``"\\n\\n"`` otherwise.
    """
    return Delimiter.coerce(delimiter).resolve(text)
