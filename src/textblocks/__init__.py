# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`textblocks`.

textblocks splits text into blocks of lines separated by a delimiter
(a blank line unless told otherwise) and maps caller-supplied parsers over
the lines and blocks. ``\\n`` and ``\\r\\n`` line endings both work.

Public surface
--------------
The names in :data:`PRIMARY_API` form the stable surface:

- :func:`split_blocks`, :func:`block_parse_lines` and :func:`block_parse`
  are the three entry points, all pure functions of their arguments.
- :class:`Delimiter` / :data:`AUTO` and :func:`resolve_delimiter` describe
  and resolve the block delimiter.
- :class:`TextBlocks` offers the same operations as methods on a ``str``.
- :class:`BlockParser` runs a declarative :class:`BlocksConfig` whose
  transforms are looked up in a :class:`TransformRegistry`.

Examples:
    >>> from textblocks import block_parse, block_parse_lines, split_blocks
    >>> s = "100\\n200\\n\\n300\\n400\\n\\n500\\n600"
    >>> split_blocks(s)
    [['100', '200'], ['300', '400'], ['500', '600']]
    >>> block_parse_lines(s, int)
    [[100, 200], [300, 400], [500, 600]]
    >>> block_parse(s, int, sum)
    [300, 700, 1100]
"""


from __future__ import annotations

# ---------------------------------------------------------------------------
# Package version
# ---------------------------------------------------------------------------
try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("textblocks")
except Exception:  # PackageNotFoundError or runtime env oddities
    __version__ = "0.0.0+unknown"


from .core.blocks import (
    TextBlock,
    block_parse,
    block_parse_lines,
    join_blocks,
    split_blocks,
    split_text_blocks,
)
from .core.config import BlocksConfig, LoggingConfig
from .core.delimiter import AUTO, Delimiter, resolve_delimiter
from .core.log import configure_logging, get_logger, temp_level
from .core.parser import BlockParser
from .core.registries import TransformRegistry, default_transform_registry
from .core.text import TextBlocks

# ---------------------------------------------------------------------------
# Stable export list
# ---------------------------------------------------------------------------
PRIMARY_API = [
    "__version__",
    "AUTO",
    "Delimiter",
    "resolve_delimiter",
    "split_blocks",
    "split_text_blocks",
    "TextBlock",
    "block_parse_lines",
    "block_parse",
    "join_blocks",
    "TextBlocks",
    "TransformRegistry",
    "default_transform_registry",
    "BlocksConfig",
    "LoggingConfig",
    "BlockParser",
    "configure_logging",
    "get_logger",
    "temp_level",
]

__all__ = list(PRIMARY_API)
