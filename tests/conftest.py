"""Pytest fixtures for cmdlex tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from cmdlex.debug_log import clear_log_buffer, teardown_debug_logging
from cmdlex.lexer import Lexer

if TYPE_CHECKING:
    from collections.abc import Generator


settings.register_profile(
    "ci",
    max_examples=300,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _mock_platform_system(monkeypatch, request):
    """Handle @pytest.mark.mock_platform_system("Windows") marker."""
    marker = request.node.get_closest_marker("mock_platform_system")
    if marker:
        target_platform = marker.args[0]
        monkeypatch.setattr("platform.system", lambda: target_platform)


@pytest.fixture(autouse=True)
def _clean_debug_logging() -> Generator[None, None, None]:
    """Ensure the debug log handler and buffer don't leak between tests."""
    yield
    teardown_debug_logging()
    clear_log_buffer()


@pytest.fixture(autouse=True)
def _no_max_arguments_override(monkeypatch) -> None:
    monkeypatch.delenv("CMDLEX_MAX_ARGUMENTS", raising=False)


@pytest.fixture
def lexer() -> Lexer:
    return Lexer()
