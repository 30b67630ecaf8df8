"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
BOLD = "\033[1m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
WARN = "!"


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False
    return True


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str, indent: int = 0) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{' ' * indent}{check} {message}")


def info(message: str, indent: int = 0) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{' ' * indent}{bullet} {message}")


def warning(message: str, indent: int = 0) -> None:
    """Print warning message with a yellow marker."""
    mark = _colorize(WARN, YELLOW)
    print(f"{' ' * indent}{mark} {message}")


def error(message: str, indent: int = 0) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{' ' * indent}{cross} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def step(number: int, message: str) -> None:
    """Print a numbered deployment step heading."""
    print()
    print(_colorize(f"STEP {number}: {message}", BOLD + BLUE))


def link(label: str, url: str) -> None:
    """Print a labelled URL."""
    print(f"   {label}: {url}")
