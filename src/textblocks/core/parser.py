# parser.py
# SPDX-License-Identifier: MIT
"""Config-driven block parsing.

:class:`BlockParser` turns a :class:`BlocksConfig` into a callable
pipeline by resolving transform names against a registry once, up front.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from .blocks import block_parse, block_parse_lines, split_blocks
from .config import BlocksConfig
from .log import get_logger
from .registries import TransformRegistry, default_transform_registry

log = get_logger(__name__)


class BlockParser:
    """Split and parse text according to a BlocksConfig.

    The parsing stage used depends on which transforms the config names:

    * neither: plain blocks of line strings;
    * ``line_parser`` only: blocks of parsed lines;
    * ``block_parser``: one value per block (lines go through
      ``line_parser`` first, or stay strings when it is unset).

    Unknown transform names fail at construction time with ValueError.
    """

    def __init__(
        self,
        config: Optional[BlocksConfig] = None,
        *,
        registry: Optional[TransformRegistry] = None,
    ) -> None:
        self.config = config or BlocksConfig()
        self.config.validate()
        self.registry = registry or default_transform_registry()
        self.line_parser: Optional[Callable[[str], Any]] = None
        self.block_parser: Optional[Callable[[list], Any]] = None
        if self.config.line_parser is not None:
            self.line_parser = self.registry.get_line(self.config.line_parser)
        if self.config.block_parser is not None:
            self.block_parser = self.registry.get_block(self.config.block_parser)
        log.debug(
            "BlockParser ready: delimiter=%r line_parser=%r block_parser=%r",
            self.config.delimiter,
            self.config.line_parser,
            self.config.block_parser,
        )

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        registry: Optional[TransformRegistry] = None,
    ) -> "BlockParser":
        return cls(BlocksConfig.from_dict(data), registry=registry)

    @classmethod
    def from_toml_text(
        cls,
        text: str,
        *,
        registry: Optional[TransformRegistry] = None,
    ) -> "BlockParser":
        return cls(BlocksConfig.from_toml_text(text), registry=registry)

    def parse(self, text: str) -> List[Any]:
        delimiter = self.config.delimiter
        if self.block_parser is not None:
            line_parser = self.line_parser or str
            return block_parse(text, line_parser, self.block_parser, delimiter)
        if self.line_parser is not None:
            return block_parse_lines(text, self.line_parser, delimiter)
        return split_blocks(text, delimiter)

    __call__ = parse


__all__ = ["BlockParser"]
