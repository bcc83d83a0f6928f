"""Tests for lexer configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cmdlex.config import LexerConfig
from cmdlex.lexer import Lexer
from cmdlex.lexing.driver import TooManyArgumentsError

pytestmark = pytest.mark.unit


def test_default_max_argument_count() -> None:
    assert LexerConfig().max_argument_count == 250


def test_negative_limit_rejected() -> None:
    with pytest.raises(ValidationError):
        LexerConfig(max_argument_count=-1)


def test_config_is_frozen() -> None:
    config = LexerConfig()
    with pytest.raises(ValidationError):
        config.max_argument_count = 5  # type: ignore[misc]


class TestFromEnv:
    def test_unset_uses_default(self) -> None:
        assert LexerConfig.from_env().max_argument_count == 250

    def test_override(self, monkeypatch) -> None:
        monkeypatch.setenv("CMDLEX_MAX_ARGUMENTS", "10")
        assert LexerConfig.from_env().max_argument_count == 10

    def test_blank_uses_default(self, monkeypatch) -> None:
        monkeypatch.setenv("CMDLEX_MAX_ARGUMENTS", "  ")
        assert LexerConfig.from_env().max_argument_count == 250

    @pytest.mark.parametrize("value", ["abc", "-3", "1.5"])
    def test_invalid_value(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("CMDLEX_MAX_ARGUMENTS", value)
        with pytest.raises(ValidationError):
            LexerConfig.from_env()


def test_lexer_honours_configured_limit() -> None:
    lexer = Lexer(LexerConfig(max_argument_count=2))

    assert lexer.max_argument_count == 2
    assert lexer.parse_args("exe a b") == ["a", "b"]
    with pytest.raises(TooManyArgumentsError):
        lexer.parse_args("exe a b c")
