"""Terminal message helpers for the Storefront CLI.

Status lines (success, warning, error) go to **stderr** with a leading glyph,
falling back to ASCII when the terminal cannot encode the emoji. Command
results are printed to stdout by the commands themselves so they can be piped.
"""

import click

SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
WARNING_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(glyphs: tuple[str, str]) -> str:
    """Pick the emoji from an ``(emoji, fallback)`` pair if stderr can show it.

    Example:
        ``glyph(SUCCESS_GLYPHS)`` is "✅" on a UTF-8 terminal and "[OK]"
        on an ASCII one.
    """
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def _emit(glyphs: tuple[str, str], msg: str, color: str) -> None:
    click.secho(f"{glyph(glyphs)}  {msg}", fg=color, bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green success line to stderr, e.g. ``✅  Validation successful``."""
    _emit(SUCCESS_GLYPHS, msg, "green")


def warn(msg: str) -> None:
    """Emit a yellow warning line to stderr, e.g. ``⚠️  Shipping Unavailable``."""
    _emit(WARNING_GLYPHS, msg, "yellow")


def error(msg: str) -> None:
    """Emit a red error line to stderr, e.g. ``❌  Invalid country code``."""
    _emit(ERROR_GLYPHS, msg, "red")
