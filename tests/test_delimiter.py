import pytest

from textblocks.core.delimiter import AUTO, Delimiter, resolve_delimiter


def test_auto_detects_lf_blank_line() -> None:
    assert resolve_delimiter("a\nb\n\nc") == "\n\n"


def test_auto_detects_crlf_anywhere_in_text() -> None:
    assert resolve_delimiter("a\r\nb\r\n\r\nc") == "\r\n\r\n"
    # a single CRLF pair is enough, even at the very end
    assert resolve_delimiter("a\nb\n\nc\r\n") == "\r\n\r\n"


def test_auto_ignores_lone_carriage_return() -> None:
    assert resolve_delimiter("a\rb\n\nc") == "\n\n"


def test_auto_on_empty_text_is_lf() -> None:
    assert resolve_delimiter("") == "\n\n"


def test_explicit_literal_is_returned_unchanged() -> None:
    assert resolve_delimiter("a\r\n\r\nb", "---") == "---"
    assert resolve_delimiter("anything", Delimiter.literal(";")) == ";"
    assert resolve_delimiter("anything", "") == ""


def test_coerce_accepts_none_str_and_delimiter() -> None:
    assert Delimiter.coerce(None) is AUTO
    assert Delimiter.coerce("x") == Delimiter.literal("x")
    spec = Delimiter.literal("--")
    assert Delimiter.coerce(spec) is spec


def test_coerce_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        Delimiter.coerce(b"\n\n")


def test_literal_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        Delimiter.literal(3)


def test_delimiter_is_a_value_type() -> None:
    assert Delimiter.auto() == AUTO
    assert AUTO.is_auto
    assert not Delimiter.literal("\n\n").is_auto
    assert hash(Delimiter.literal("a")) == hash(Delimiter.literal("a"))


def test_resolution_does_not_mutate_spec() -> None:
    spec = Delimiter.auto()
    spec.resolve("a\r\nb")
    assert spec.is_auto
    assert spec.resolve("a\nb") == "\n\n"
