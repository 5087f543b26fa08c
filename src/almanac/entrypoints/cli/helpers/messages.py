"""Terminal message helpers for the ALMANAC CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr so stdout can remain machine-readable.
"""

import click

WARN_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
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
    """Return the emoji of an `(emoji, fallback)` pair if stderr can show it.

    Args:
        glyphs: The emoji and its ASCII fallback.

    Returns:
        str: The emoji when the stream supports it, otherwise the fallback.
    """
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  CST is used by 12 timezones; picked America/Bahia_Banderas.``
    """
    click.secho(f"{glyph(WARN_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  No timezone uses abbreviation 'XYZ' at instant 0.``
    """
    click.secho(f"{glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
