"""Line, word and character statistics for uploaded text files.

The counting rules reproduce the numbers already stored for earlier uploads,
including two quirks downstream consumers rely on: empty input reports one
line and one word.
"""

# Standard Library
import re

# Local Modules
from file_processor.data_classes import TextStats
from file_processor.exceptions import DecodeError

# Maximum preview length, in UTF-16 code units
PREVIEW_LENGTH = 100

# Whitespace and line terminators as understood by JavaScript's trim() and \s
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_LINE_BREAK_RE = re.compile(r"\r?\n")
_WHITESPACE_RUN_RE = re.compile(f"[{_WHITESPACE}]+")


def _utf16_units(char: str) -> int:
    # Characters outside the BMP take a surrogate pair
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Return the length of ``text`` in UTF-16 code units."""
    return len(text) + sum(1 for char in text if ord(char) > 0xFFFF)


def extract_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Return the leading ``limit`` UTF-16 code units of ``text``.

    When an astral character would straddle the limit it is dropped rather
    than split, so the preview is then one unit shorter than ``limit``. A
    lone surrogate cannot be stored in DynamoDB, so this is the deliberate
    rule rather than a plain slice of the first ``limit`` units.

    Parameters
    ----------
    text : str
        The full text.
    limit : int, optional
        Maximum preview length in code units, by default 100.

    Returns
    -------
    str
        The untrimmed prefix of ``text``.
    """
    units = 0
    for index, char in enumerate(text):
        units += _utf16_units(char)
        if units > limit:
            return text[:index]
    return text


def count_lines(text: str) -> int:
    """Count ``\\r?\\n`` separated segments; ``""`` has one segment."""
    return len(_LINE_BREAK_RE.split(text))


def count_words(text: str) -> int:
    """Count whitespace separated tokens, ignoring edge whitespace.

    Empty or whitespace-only text still yields one (empty) token.
    """
    segments = _WHITESPACE_RUN_RE.split(text)
    count = len(segments)
    # Leading and trailing whitespace leave one empty edge segment each
    if count > 1 and segments[0] == "":
        count -= 1
    if count > 1 and segments[-1] == "":
        count -= 1
    return count


def compute_text_stats(text: str) -> TextStats:
    """Compute the statistics stored for a file.

    Parameters
    ----------
    text : str
        The fully decoded file content.

    Returns
    -------
    TextStats
        Line, word and character counts plus the preview.
    """
    return TextStats(
        line_count=count_lines(text),
        word_count=count_words(text),
        char_count=utf16_length(text),
        preview=extract_preview(text),
    )


def decode_text(content: bytes, object_key: str) -> str:
    """Decode raw object bytes as strict UTF-8.

    Parameters
    ----------
    content : bytes
        The object body.
    object_key : str
        The object key, used in the error message.

    Returns
    -------
    str
        The decoded text.

    Raises
    ------
    DecodeError
        If ``content`` is not valid UTF-8.
    """
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(object_key) from e
