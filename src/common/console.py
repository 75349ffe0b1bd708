"""ANSI colour codes and report formatting helpers."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stderr.isatty()
    RED = "\033[0;31m" if _tty else ""
    GREEN = "\033[0;32m" if _tty else ""
    CYAN = "\033[0;36m" if _tty else ""
    YELLOW = "\033[1;33m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def info(msg: str) -> None:
    print(f"{C.CYAN}[INFO]{C.NC}  {msg}", file=sys.stderr)


def ok(msg: str) -> None:
    print(f"{C.GREEN}[ OK ]{C.NC} {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"{C.YELLOW}[WARN]{C.NC} {msg}", file=sys.stderr)


def fail(msg: str) -> None:
    print(f"{C.RED}[FAIL]{C.NC} {msg}", file=sys.stderr)
    sys.exit(1)


# ── Report formatting ────────────────────────────────────────────────────────

DIV = "-" * 79
SEC = "=" * 79


def header(title: str) -> str:
    return f"\n{SEC}\n  {title}\n{SEC}"
