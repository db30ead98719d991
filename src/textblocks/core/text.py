# text.py
# SPDX-License-Identifier: MIT
"""Method-style access to block splitting on a ``str`` subclass."""
from __future__ import annotations

from typing import Any, Callable, List

from .blocks import block_parse, block_parse_lines, split_blocks, split_text_blocks, TextBlock
from .delimiter import DelimiterLike, resolve_delimiter

__all__ = ["TextBlocks"]


class TextBlocks(str):
    """A string that knows how to split itself into blocks.

    Behaves exactly like ``str`` otherwise::

        >>> TextBlocks("100\\n200\\n\\n300\\n400").as_blocks()
        [['100', '200'], ['300', '400']]
    """

    __slots__ = ()

    def delimiter(self, spec: DelimiterLike = None) -> str:
        return resolve_delimiter(self, spec)

    def as_blocks(self, delimiter: DelimiterLike = None) -> List[List[str]]:
        return split_blocks(str(self), delimiter)

    def as_text_blocks(self, delimiter: DelimiterLike = None) -> List[TextBlock]:
        return split_text_blocks(str(self), delimiter)

    def block_parse_lines(
        self,
        line_parser: Callable[[str], Any],
        delimiter: DelimiterLike = None,
    ) -> List[List[Any]]:
        return block_parse_lines(str(self), line_parser, delimiter)

    def block_parse(
        self,
        line_parser: Callable[[str], Any],
        block_parser: Callable[[List[Any]], Any],
        delimiter: DelimiterLike = None,
    ) -> List[Any]:
        return block_parse(str(self), line_parser, block_parser, delimiter)
