# registries.py
# SPDX-License-Identifier: MIT
"""Registry of named line and block transforms.

Lets a parsing setup be described declaratively (``line_parser = "int"``)
and resolved to callables later.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .log import get_logger

log = get_logger(__name__)

LineTransform = Callable[[str], Any]
BlockTransform = Callable[[list], Any]


@dataclass
class TransformRegistry:
    """Named line transforms and block transforms, kept in separate namespaces."""

    _line: dict[str, LineTransform] = field(default_factory=dict)
    _block: dict[str, BlockTransform] = field(default_factory=dict)

    def register_line(self, name: str, fn: LineTransform, *, replace: bool = False) -> None:
        """Register a callable applied to each line."""
        self._register(self._line, "line", name, fn, replace=replace)

    def register_block(self, name: str, fn: BlockTransform, *, replace: bool = False) -> None:
        """Register a callable applied to each block's parsed lines."""
        self._register(self._block, "block", name, fn, replace=replace)

    def line(
        self,
        name: str,
        *,
        replace: bool = False,
    ) -> Callable[[LineTransform], LineTransform]:
        """Decorator form of :meth:`register_line`."""
        def decorator(fn: LineTransform) -> LineTransform:
            self.register_line(name, fn, replace=replace)
            return fn

        return decorator

    def block(
        self,
        name: str,
        *,
        replace: bool = False,
    ) -> Callable[[BlockTransform], BlockTransform]:
        """Decorator form of :meth:`register_block`."""
        def decorator(fn: BlockTransform) -> BlockTransform:
            self.register_block(name, fn, replace=replace)
            return fn

        return decorator

    def get_line(self, name: str) -> LineTransform:
        fn = self._line.get(name)
        if fn is None:
            raise ValueError(f"Unknown line transform {name!r}")
        return fn

    def get_block(self, name: str) -> BlockTransform:
        fn = self._block.get(name)
        if fn is None:
            raise ValueError(f"Unknown block transform {name!r}")
        return fn

    def line_names(self) -> list[str]:
        return sorted(self._line)

    def block_names(self) -> list[str]:
        return sorted(self._block)

    @staticmethod
    def _register(
        table: dict[str, Any],
        kind: str,
        name: str,
        fn: Any,
        *,
        replace: bool,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f"{kind} transform name must be a non-empty string")
        if not callable(fn):
            raise TypeError(f"{kind} transform {name!r} must be callable")
        if not replace and name in table:
            raise ValueError(f"{kind.capitalize()} transform {name!r} is already registered")
        table[name] = fn
        log.debug("Registered %s transform %r", kind, name)


def _identity(value: Any) -> Any:
    return value


def _join(values: list) -> str:
    return "".join(str(v) for v in values)


def default_transform_registry() -> TransformRegistry:
    """Build a TransformRegistry populated with the built-in transforms."""
    reg = TransformRegistry()
    reg.register_line("str", _identity)
    reg.register_line("strip", str.strip)
    reg.register_line("int", int)
    reg.register_line("float", float)
    reg.register_line("chars", list)
    reg.register_line("split", str.split)
    reg.register_line("csv", lambda line: line.split(","))

    reg.register_block("list", _identity)
    reg.register_block("tuple", tuple)
    reg.register_block("sum", sum)
    reg.register_block("max", max)
    reg.register_block("min", min)
    reg.register_block("len", len)
    reg.register_block("join", _join)
    reg.register_block("set", set)
    return reg


__all__ = [
    "TransformRegistry",
    "default_transform_registry",
]
