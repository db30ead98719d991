# blocks.py
# SPDX-License-Identifier: MIT
"""Split text into delimiter-separated blocks of lines and map over them.

Blocks are separated by a delimiter (a blank line unless told otherwise),
and each block is a list of lines with any trailing carriage return
removed. Splitting never fails for a string input; the mapping helpers let
whatever the caller's parsers raise propagate untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

from .delimiter import CRLF, LF, Delimiter, DelimiterLike
from .log import get_logger

__all__ = [
    "TextBlock",
    "split_blocks",
    "split_text_blocks",
    "block_parse_lines",
    "block_parse",
    "join_blocks",
]

log = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

LineParser = Callable[[str], T]
BlockReducer = Callable[[List[T]], U]


@dataclass(slots=True, frozen=True)
class TextBlock:
    """One block together with where it came from.

    Attributes:
        lines (tuple[str, ...]): Block lines, carriage returns stripped.
        start (int): Offset of the block's segment in the source text.
        end (int): Offset just past the segment, so
            ``text[start:end]`` is the raw segment (delimiter excluded).
    """
    lines: Tuple[str, ...]
    start: int
    end: int

    def as_list(self) -> List[str]:
        return list(self.lines)


def _split_lines(segment: str) -> List[str]:
    """Split a segment on LF and drop one trailing CR from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in segment.split(LF)]


def _prepare(text: str, delimiter: DelimiterLike) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str; got {type(text).__name__}.")
    resolved = Delimiter.coerce(delimiter).resolve(text)
    if not resolved:
        raise ValueError("delimiter must be a non-empty string")
    return resolved


def split_blocks(text: str, delimiter: DelimiterLike = None) -> List[List[str]]:
    """Split ``text`` into blocks of lines.

    The delimiter is matched as a literal substring. Every segment between
    delimiters becomes a block, including empty ones: ``""`` yields
    ``[[""]]`` and a trailing delimiter yields a final ``[""]`` block.

    Args:
        text (str): Input text.
        delimiter (Delimiter | str | None): Explicit delimiter, or None
            for automatic blank-line detection.

    Returns:
        list[list[str]]: Blocks in input order, each a list of lines.

    Raises:
        TypeError: If ``text`` is not a string.
        ValueError: If the resolved delimiter is empty.
    """
    resolved = _prepare(text, delimiter)
    blocks = [_split_lines(segment) for segment in text.split(resolved)]
    log.debug("Split %d chars into %d block(s) on %r", len(text), len(blocks), resolved)
    return blocks


def split_text_blocks(text: str, delimiter: DelimiterLike = None) -> List[TextBlock]:
    """Like :func:`split_blocks`, but keep each block's source offsets."""
    resolved = _prepare(text, delimiter)
    out: List[TextBlock] = []
    start = 0
    while True:
        idx = text.find(resolved, start)
        end = len(text) if idx < 0 else idx
        out.append(TextBlock(tuple(_split_lines(text[start:end])), start, end))
        if idx < 0:
            break
        start = idx + len(resolved)
    log.debug("Split %d chars into %d block span(s) on %r", len(text), len(out), resolved)
    return out


def block_parse_lines(
    text: str,
    line_parser: LineParser,
    delimiter: DelimiterLike = None,
) -> List[List[T]]:
    """Split ``text`` into blocks and apply ``line_parser`` to every line.

    Order is preserved at both levels. An exception raised by
    ``line_parser`` propagates immediately and no result is returned.
    """
    return [[line_parser(line) for line in block] for block in split_blocks(text, delimiter)]


def block_parse(
    text: str,
    line_parser: LineParser,
    block_parser: BlockReducer,
    delimiter: DelimiterLike = None,
) -> List[U]:
    """Parse every line, then reduce each block with ``block_parser``.

    ``block_parser`` receives the full list of parsed lines for one block
    and its return value becomes that block's entry in the result.

    Example:
        >>> block_parse("100\\n200\\n\\n300", int, sum)
        [300, 300]
    """
    return [block_parser(parsed) for parsed in block_parse_lines(text, line_parser, delimiter)]


def join_blocks(
    blocks: Iterable[Sequence[str]],
    delimiter: DelimiterLike = None,
    newline: str = LF,
) -> str:
    """Join blocks back into text.

    Lines are joined with ``newline`` and blocks with the delimiter. In
    automatic mode the delimiter is two ``newline`` sequences of the
    matching convention, which makes this the inverse of
    :func:`split_blocks` for text whose lines hold no delimiter and no CR.

    Raises:
        ValueError: If an explicit delimiter is empty.
    """
    spec = Delimiter.coerce(delimiter)
    if spec.is_auto:
        sep = (CRLF if newline == CRLF else LF) * 2
    else:
        sep = spec.resolve("")
        if not sep:
            raise ValueError("delimiter must be a non-empty string")
    return sep.join(newline.join(block) for block in blocks)
