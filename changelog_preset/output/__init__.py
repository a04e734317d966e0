"""Terminal Output Formatting Package"""

import re
import sys
import os

from changelog_preset import COMMIT_TYPES


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    """True when stdout can encode the check, cross and bullet glyphs."""
    encoding = getattr(sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '✓✗•'.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
BULLET = '•' if UNICODE_ENABLED else '*'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


SECTION_COLORS = {
    COMMIT_TYPES['add']: Colors.GREEN,
    COMMIT_TYPES['fix']: Colors.RED,
    COMMIT_TYPES['change']: Colors.YELLOW,
    COMMIT_TYPES['remove']: Colors.MAGENTA,
}

MARKDOWN_LINK_RE = re.compile(r'\[([^\]]+)\]\([^)]+\)')


def colorize_section(title: str) -> str:
    """Color a changelog section heading by its display label."""
    color = SECTION_COLORS.get(title)
    if color:
        return _colorize(title, Colors.BOLD, color)
    return bold(title)


def highlight_links(text: str) -> str:
    """Show markdown links as their colored label, dropping the URL."""
    return MARKDOWN_LINK_RE.sub(lambda m: info(m.group(1)), text)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "BULLET",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error",
    "colorize_section", "highlight_links", "SECTION_COLORS",
]
