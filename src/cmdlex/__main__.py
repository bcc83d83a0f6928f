"""CLI entry point for cmdlex."""

from __future__ import annotations

from cmdlex.cli import cli

if __name__ == "__main__":
    cli()
