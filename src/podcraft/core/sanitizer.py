"""Clean-up of model-generated text.

Text models like to answer in Markdown.  Before generated text is placed in a
downstream prompt or returned to a caller, heading markers, emphasis markers,
stray backslash escapes and line breaks are stripped so the result reads as a
single plain paragraph.
"""

from __future__ import annotations

# Characters removed from generated text.  Everything else is preserved, in order.
# The line-break set is exactly the one ``str.splitlines()`` splits on.
_LINE_BREAKS = "\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029"
_STRIPPED_CHARACTERS = "#*\\" + _LINE_BREAKS

_TRANSLATION_TABLE = str.maketrans("", "", _STRIPPED_CHARACTERS)


def sanitize(raw: str) -> str:
    """Remove markup artifacts from generated text.

    Deletes every ``#``, ``*``, backslash and line-break character.  The
    function is total and idempotent: ``sanitize(sanitize(x)) == sanitize(x)``
    and ``sanitize("") == ""``.

    Args:
        raw: Text as returned by a generation adapter.

    Returns:
        The input with the stripped characters removed.
    """
    return raw.translate(_TRANSLATION_TABLE)
