# config.py
# SPDX-License-Identifier: MIT
"""Declarative configuration for block parsing.

Configs hold only names and scalars; transforms are referenced by their
registry names and resolved by :class:`~textblocks.core.parser.BlockParser`.
Helpers convert configs to and from plain mappings and TOML text.
"""
from __future__ import annotations

try:  # pragma: no cover - optional dependency
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    try:
        import tomli as tomllib  # type: ignore[assignment]
    except Exception:  # pragma: no cover
        tomllib = None  # type: ignore[assignment]
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .log import PACKAGE_LOGGER_NAME, configure_logging

T = TypeVar("T")


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate/logger_name to
    integrate with host apps.
    """
    level: int | str = "WARNING"
    propagate: bool = True
    fmt: Optional[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self) -> None:
        """Apply this logging configuration to the package logger."""
        configure_logging(
            level=self.level,
            propagate=self.propagate,
            fmt=self.fmt,
            logger_name=self.logger_name or PACKAGE_LOGGER_NAME,
        )


@dataclass(slots=True)
class BlocksConfig:
    """Declarative description of how to split and parse text.

    Attributes:
        delimiter (str | None): Literal block delimiter, or None to detect
            a blank line from the text's line endings.
        line_parser (str | None): Registry name of the line transform.
        block_parser (str | None): Registry name of the block transform.
            When set without ``line_parser``, lines are passed as strings.
        logging (LoggingConfig): Package logger settings.
    """
    delimiter: Optional[str] = None
    line_parser: Optional[str] = None
    block_parser: Optional[str] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.logging, LoggingConfig):
            self.logging = _dataclass_from_dict(LoggingConfig, self.logging)

    def validate(self) -> None:
        """Check field types, raising TypeError/ValueError on bad values."""
        for name in ("delimiter", "line_parser", "block_parser"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{name} must be a string or None; got {type(value).__name__}.")
        if self.delimiter == "":
            raise ValueError("delimiter must be a non-empty string or None.")
        for name in ("line_parser", "block_parser"):
            if getattr(self, name) == "":
                raise ValueError(f"{name} must be a non-empty name or None.")

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-data representation, skipping None fields."""
        return _dataclass_to_dict(self)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
        """Instantiate a config from a mapping; unknown keys are ignored."""
        if data is not None and not isinstance(data, Mapping):
            raise TypeError(f"Config data must be a mapping; got {type(data).__name__}.")
        return _dataclass_from_dict(cls, data)

    @classmethod
    def from_toml_text(cls: Type[T], text: str) -> T:
        """Parse a config from a TOML document held in memory.

        Top-level keys map to fields; logger settings live under a
        ``[logging]`` table.
        """
        if tomllib is None:
            raise RuntimeError(
                "TOML support requires Python 3.11+ (tomllib) or installing the 'tomli' package."
            )
        data = tomllib.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"Top-level TOML document must be a mapping; got {type(data).__name__}.")
        return cls.from_dict(data)  # type: ignore[attr-defined]


def _dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[f.name] = _dataclass_to_dict(value) if is_dataclass(value) else value
    return result


def _dataclass_from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
    """Instantiate dataclass ``cls`` from a mapping, recursing into nested dataclasses."""
    if data is None:
        return cls()  # type: ignore[call-arg]
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__} data must be a mapping; got {type(data).__name__}.")
    type_hints = get_type_hints(cls)

    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        field_type = type_hints.get(f.name, f.type)
        kwargs[f.name] = _coerce_value(field_type, data[f.name])
    return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_value(expected_type: Any, value: Any) -> Any:
    base_type, _ = _strip_optional(expected_type)
    if value is None:
        return None
    if isinstance(base_type, type) and is_dataclass(base_type):
        if is_dataclass(value):
            return value
        return _dataclass_from_dict(base_type, value)
    return value


def _strip_optional(typ: Any) -> Tuple[Any, bool]:
    """Return ``(base_type, is_optional)`` for a possibly-Optional annotation."""
    origin = get_origin(typ)
    if origin is Union:
        args = [arg for arg in get_args(typ) if arg is not type(None)]
        if len(args) == 1:
            base, _ = _strip_optional(args[0])
            return base, True
    return typ, False


__all__ = ["BlocksConfig", "LoggingConfig"]
