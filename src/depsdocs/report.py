"""
Console reporting for deps-docs.

Progress goes to stdout and failures to stderr, coloured with colorama.
"""

from __future__ import annotations

import sys

from colorama import Fore, Style

PREFIX = "[deps-docs]"


def _emit(msg: str, color: str, *, err: bool = False) -> None:
    print(color + msg + Style.RESET_ALL, file=sys.stderr if err else sys.stdout)


def copied(filename: str, package: str) -> None:
    _emit(f"{PREFIX} ✓ Copied {filename} for {package}", Fore.GREEN)


def failed(filename: str, package: str, exc: BaseException) -> None:
    _emit(f"{PREFIX} ✗ Failed to copy {filename} for {package}: {exc}", Fore.RED, err=True)


def nothing_found(package: str) -> None:
    _emit(f"{PREFIX} - No README.md or LICENSE files found for {package}", Fore.YELLOW)


def info(msg: str) -> None:
    print(msg)


def summary(copied_count: int, skipped_count: int, out_dir) -> None:
    _emit(
        f"Processed {copied_count} packages, skipped {skipped_count}. Output: {out_dir}",
        Fore.GREEN,
    )


def error(msg: str) -> None:
    _emit(f"{PREFIX} ✗ {msg}", Fore.RED, err=True)


def fatal(msg: str) -> None:
    _emit(msg, Fore.RED, err=True)
