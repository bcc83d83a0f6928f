"""Tests for the public splitting and building API."""

from __future__ import annotations

import pytest

from cmdlex import (
    Lexer,
    ParseResult,
    TooManyArgumentsError,
    build_command_line,
    parse_args,
    parse_exe_and_args,
)
from cmdlex.lexing.trace import StateLog

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("command_line", "executable_name", "arguments"),
    [
        ("", "", []),
        ("foo", "foo", []),
        ("foo bar bear", "foo", ["bar", "bear"]),
        ("foo    bar     bear    ", "foo", ["bar", "bear"]),
        ('foo "bar bear"', "foo", ["bar bear"]),
        ('program.exe "hello there.txt"', "program.exe", ["hello there.txt"]),
        (r'program.exe "C:\Hello there.txt"', "program.exe", [r"C:\Hello there.txt"]),
        (r'program.exe "hello\"there"', "program.exe", ['hello"there']),
        (r'program.exe "hello\\"', "program.exe", ["hello\\"]),
        # Quote doubling applies to arguments but not the executable name
        ('x foo"bar', "x", ["foobar"]),
        ('x foo""bar', "x", ["foobar"]),
        ('x foo"""bar', "x", ['foo"bar']),
        ('x foo"x""bar', "x", ['foox"bar']),
        ('foo"bar', "foobar", []),
        ('foo""""bar', "foobar", []),
        # A leading separator means an empty executable name
        ("   spaces are  here  and there  ", "", ["spaces", "are", "here", "and", "there"]),
        ('"C:\\Program Files\\app.exe" -v', "C:\\Program Files\\app.exe", ["-v"]),
        ('exe ""', "exe", [""]),
    ],
)
def test_parse_exe_and_args(command_line: str, executable_name: str, arguments: list[str]) -> None:
    result = parse_exe_and_args(command_line)

    assert result == ParseResult(executable_name, tuple(arguments))


def test_parse_args_discards_executable() -> None:
    assert parse_args('"""CallMeIshmael""" b c') == ["b", "c"]
    assert parse_args("x " + '"""CallMeIshmael""" b c') == ['"CallMeIshmael"', "b", "c"]
    assert parse_args(r"x CallMe\"Ishmael") == ['CallMe"Ishmael']


def test_result_is_immutable() -> None:
    result = parse_exe_and_args("a b")

    assert isinstance(result.arguments, tuple)
    with pytest.raises(AttributeError):
        result.executable_name = "c"  # type: ignore[misc]


def test_result_to_dict() -> None:
    assert parse_exe_and_args("a b").to_dict() == {"executable_name": "a", "arguments": ["b"]}


class TestTerminator:
    def test_truncates_executable_name(self) -> None:
        assert parse_exe_and_args("ab\0cd ef") == ParseResult("ab")

    def test_truncates_arguments(self) -> None:
        assert parse_args("exe a\0 b c") == ["a"]


class TestBackslashParity:
    @pytest.mark.parametrize(
        ("backslashes", "expected"),
        [
            (0, "y"),
            (1, '"y'),
            (2, "\\y"),
            (3, '\\"y'),
            (4, "\\\\y"),
            (5, '\\\\"y'),
        ],
    )
    def test_backslashes_before_quote(self, backslashes: int, expected: str) -> None:
        assert parse_args("x " + "\\" * backslashes + '"y"') == [expected]


class TestArgumentLimit:
    def test_default_limit(self) -> None:
        at_limit = "exe " + " ".join(["a"] * 250)

        assert len(parse_args(at_limit)) == 250
        with pytest.raises(TooManyArgumentsError):
            parse_args(at_limit + " a")

    def test_executable_name_does_not_count(self, lexer: Lexer) -> None:
        assert lexer.parse_exe_and_args("exe").arguments == ()


def test_observer_receives_argument_steps(lexer: Lexer) -> None:
    log = StateLog()

    lexer.parse_exe_and_args('exe "a b"', observer=log)

    assert log
    assert log[-1].argument == "a b"


class TestBuildCommandLine:
    def test_arguments_only(self) -> None:
        assert build_command_line(["abc\\", "a b", "abc"]) == '"abc\\\\" "a b" abc'

    def test_with_executable(self) -> None:
        assert build_command_line("prog.exe", ["a b"]) == 'prog.exe "a b"'

    def test_single_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            build_command_line("a b")

    def test_non_string_executable_rejected(self) -> None:
        with pytest.raises(TypeError):
            build_command_line(["a"], ["b"])  # type: ignore[call-overload]

    def test_lexer_methods(self, lexer: Lexer) -> None:
        assert lexer.args_to_command_line(["", "x"]) == '"" x'
        assert lexer.build_command_line("", ["x"]) == '"" x'
        assert lexer.parse_exe_and_args('"" x') == ParseResult("", ("x",))
