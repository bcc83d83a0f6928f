"""Configuration for the command-line lexer."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from cmdlex.limits import DEFAULT_MAX_ARGUMENTS, MAX_ARGUMENTS_ENV_VAR


class LexerConfig(BaseModel):
    """Settings that shape how command lines are split."""

    model_config = ConfigDict(frozen=True)

    max_argument_count: int = Field(
        default=DEFAULT_MAX_ARGUMENTS,
        ge=0,
        description="Maximum arguments per command line, executable name excluded",
    )

    @classmethod
    def from_env(cls) -> LexerConfig:
        """Build a config, honouring the CMDLEX_MAX_ARGUMENTS override.

        An empty or unset variable keeps the default; an invalid value raises
        ``pydantic.ValidationError``.
        """
        raw = os.environ.get(MAX_ARGUMENTS_ENV_VAR, "").strip()
        if not raw:
            return cls()
        return cls.model_validate({"max_argument_count": raw})
