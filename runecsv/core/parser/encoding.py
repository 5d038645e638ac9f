"""
Encoding detection for CSV input.

A byte order mark decides outright. Without one, charset-normalizer guesses
from a leading sample of the data. Every name returned here is a canonical
Python codec name, ready for ``bytes.decode`` and ``open``.
"""

from __future__ import annotations

import codecs
import logging

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

# Bytes handed to charset-normalizer
DETECTION_SAMPLE_SIZE = 8192

# UTF-32 LE must be tried before UTF-16 LE, its mark is a prefix of it.
# The utf-16/utf-32 codecs read the mark to pick the byte order and drop it.
BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

FALLBACK_ENCODING = "cp1252"


def codec_name(encoding: str) -> str:
    """
    Canonical Python codec name for an encoding label.

    >>> codec_name("UTF8"), codec_name("latin_1")
    ('utf-8', 'iso8859-1')

    Raises:
        LookupError: If Python has no codec for the label
    """
    return codecs.lookup(encoding).name


def bom_encoding(data: bytes) -> str | None:
    """Return the codec implied by a leading byte order mark, if any."""
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding
    return None


def _is_utf8_sample(sample: bytes) -> bool:
    """Check sample is UTF-8, allowing it to end inside a character."""
    # Non-final decode keeps an incomplete trailing sequence buffered
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return False
    return True


def detect_encoding(data: bytes) -> str:
    """
    Detect the encoding of CSV data.

    Only the first DETECTION_SAMPLE_SIZE bytes are examined:
    - a sample that is valid UTF-8 (ASCII included) gives utf-8, even when it
      ends inside a multi-byte character
    - anything else goes to charset-normalizer, then to FALLBACK_ENCODING

    Args:
        data: Leading bytes of the input, or all of it

    Returns:
        Codec name, e.g. "utf-8-sig", "utf-16", "utf-8" or "cp1252"
    """
    encoding = bom_encoding(data)
    if encoding is not None:
        logger.debug("Byte order mark selects %s", encoding)
        return encoding

    sample = data[:DETECTION_SAMPLE_SIZE]
    # NUL bytes in "valid UTF-8" usually mean UTF-16 or UTF-32 without a mark
    if _is_utf8_sample(sample) and b"\x00" not in sample:
        return "utf-8"

    best = from_bytes(sample).best()
    if best is not None:
        encoding = codec_name(best.encoding)
        logger.debug("charset-normalizer detected %s", encoding)
        return "utf-8" if encoding == "ascii" else encoding

    logger.debug("No encoding detected, falling back to %s", FALLBACK_ENCODING)
    return FALLBACK_ENCODING
