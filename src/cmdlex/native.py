"""Adapter for the operating system's own command-line splitter.

Windows exposes ``CommandLineToArgvW`` from shell32, which follows a slightly
different convention than the Visual C++ runtime. It is only reachable on
Windows; other platforms raise :class:`NativeSplitterUnavailableError`.
"""

from __future__ import annotations

import logging
import platform

from cmdlex.models import ParseResult

logger = logging.getLogger(__name__)


class NativeSplitterUnavailableError(RuntimeError):
    """Raised when the host has no native command-line splitter."""


def is_native_available() -> bool:
    """Return True when running on Windows."""
    return platform.system() == "Windows"


def _command_line_to_argv_windows(command_line: str) -> list[str]:
    import ctypes
    from ctypes import wintypes

    shell32 = ctypes.WinDLL("shell32", use_last_error=True)
    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

    shell32.CommandLineToArgvW.argtypes = [wintypes.LPCWSTR, ctypes.POINTER(ctypes.c_int)]
    shell32.CommandLineToArgvW.restype = ctypes.POINTER(wintypes.LPWSTR)
    kernel32.LocalFree.argtypes = [ctypes.c_void_p]
    kernel32.LocalFree.restype = ctypes.c_void_p

    argc = ctypes.c_int(0)
    argv = shell32.CommandLineToArgvW(command_line, ctypes.byref(argc))
    if not argv:
        raise ctypes.WinError(ctypes.get_last_error())
    try:
        return [argv[index] for index in range(argc.value)]
    finally:
        kernel32.LocalFree(ctypes.cast(argv, ctypes.c_void_p))


def native_parse_exe_and_args(command_line: str) -> ParseResult:
    """Split *command_line* with ``CommandLineToArgvW``.

    Note that Windows substitutes the current executable's path when
    *command_line* is empty.
    """
    if not is_native_available():
        raise NativeSplitterUnavailableError(
            f"CommandLineToArgvW is not available on {platform.system() or 'this platform'}"
        )
    argv = _command_line_to_argv_windows(command_line)
    logger.debug("CommandLineToArgvW returned %d entries", len(argv))
    if not argv:
        return ParseResult("")
    return ParseResult.from_tokens(argv[0], argv[1:])
