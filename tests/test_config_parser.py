import logging

import pytest

from textblocks.core.config import BlocksConfig, LoggingConfig
from textblocks.core.parser import BlockParser
from textblocks.core.registries import TransformRegistry

NUMBERS = "100\n200\n\n300\n400\n\n500\n600"


def test_default_config_round_trips_through_dict() -> None:
    cfg = BlocksConfig()
    data = cfg.to_dict()
    assert "delimiter" not in data
    assert data["logging"]["logger_name"] == "textblocks"
    assert BlocksConfig.from_dict(data) == cfg


def test_from_dict_builds_nested_logging_and_ignores_unknown_keys() -> None:
    cfg = BlocksConfig.from_dict(
        {"delimiter": "--", "line_parser": "int", "logging": {"level": "DEBUG"}, "extra": 1}
    )
    assert cfg.delimiter == "--"
    assert cfg.line_parser == "int"
    assert isinstance(cfg.logging, LoggingConfig)
    assert cfg.logging.level == "DEBUG"


def test_from_dict_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        BlocksConfig.from_dict(["delimiter"])


def test_from_toml_text() -> None:
    cfg = BlocksConfig.from_toml_text(
        '''
delimiter = "\\n---\\n"
line_parser = "int"
block_parser = "sum"

[logging]
level = "INFO"
'''
    )
    assert cfg.delimiter == "\n---\n"
    assert cfg.block_parser == "sum"
    assert cfg.logging.level == "INFO"


def test_validate_rejects_bad_values() -> None:
    with pytest.raises(TypeError):
        BlocksConfig(delimiter=5).validate()
    with pytest.raises(ValueError):
        BlocksConfig(delimiter="").validate()
    with pytest.raises(ValueError):
        BlocksConfig(line_parser="").validate()


def test_parser_without_transforms_splits_only() -> None:
    assert BlockParser().parse(NUMBERS) == [["100", "200"], ["300", "400"], ["500", "600"]]


def test_parser_line_only() -> None:
    parser = BlockParser(BlocksConfig(line_parser="int"))
    assert parser.parse(NUMBERS) == [[100, 200], [300, 400], [500, 600]]


def test_parser_line_and_block() -> None:
    parser = BlockParser.from_dict({"line_parser": "int", "block_parser": "sum"})
    assert parser(NUMBERS) == [300, 700, 1100]


def test_parser_block_only_keeps_lines_as_strings() -> None:
    parser = BlockParser(BlocksConfig(block_parser="join"))
    assert parser.parse(NUMBERS) == ["100200", "300400", "500600"]


def test_parser_block_only_works_with_registry_lacking_str() -> None:
    reg = TransformRegistry()
    reg.register_block("count", len)
    parser = BlockParser(BlocksConfig(block_parser="count"), registry=reg)
    assert parser.parse("a\nb\n\nc") == [2, 1]


def test_parser_uses_configured_delimiter() -> None:
    parser = BlockParser.from_toml_text('delimiter = ";"\nline_parser = "strip"')
    assert parser.parse(" a ; b") == [["a"], ["b"]]


def test_parser_unknown_names_fail_at_construction() -> None:
    with pytest.raises(ValueError, match="Unknown line transform"):
        BlockParser(BlocksConfig(line_parser="hex"))
    with pytest.raises(ValueError, match="Unknown block transform"):
        BlockParser(BlocksConfig(block_parser="median"))


def test_parser_propagates_transform_failure() -> None:
    parser = BlockParser(BlocksConfig(line_parser="int", block_parser="sum"))
    with pytest.raises(ValueError):
        parser.parse("1\n\nnot-a-number")


def test_parser_custom_registry() -> None:
    reg = TransformRegistry()
    reg.register_line("upper", str.upper)
    reg.register_block("first", lambda block: block[0])
    parser = BlockParser(BlocksConfig(line_parser="upper", block_parser="first"), registry=reg)
    assert parser.parse("ab\ncd\n\nef") == ["AB", "EF"]


def test_logging_config_apply_sets_level() -> None:
    logger = logging.getLogger("textblocks.test.apply")
    logger.setLevel(logging.WARNING)
    LoggingConfig(level="DEBUG", logger_name=logger.name).apply()
    try:
        assert logger.level == logging.DEBUG
        assert logger.propagate is True
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)


@pytest.mark.parametrize("value", ["DEBUG", 5, ["level"]])
def test_from_dict_rejects_non_mapping_logging(value) -> None:
    with pytest.raises(TypeError, match="LoggingConfig data must be a mapping"):
        BlocksConfig.from_dict({"logging": value})


def test_from_toml_text_rejects_scalar_logging() -> None:
    with pytest.raises(TypeError, match="got str"):
        BlocksConfig.from_toml_text('logging = "DEBUG"\n')


def test_constructor_rejects_non_mapping_logging() -> None:
    with pytest.raises(TypeError):
        BlocksConfig(logging="DEBUG")
    assert BlocksConfig(logging={"level": "INFO"}).logging.level == "INFO"
