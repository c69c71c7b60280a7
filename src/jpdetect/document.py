"""Loading and saving editor text in a detected encoding.

:func:`decode` turns raw file bytes into editor text: it detects the
encoding, drops a leading BOM character and normalizes every line ending to
LF while remembering the one the file used.  :func:`encode` reverses that for
saving.
"""

from __future__ import annotations

import dataclasses
import logging
import re

from jpdetect.enums import EncodingTag, Newline
from jpdetect.pipeline.orchestrator import run_pipeline
from jpdetect.registry import lookup

logger = logging.getLogger(__name__)

_BOM_CHAR = "\ufeff"

# CRLF, CR, NEL (U+0085), LINE SEPARATOR and PARAGRAPH SEPARATOR all become LF.
_LINE_BREAKS = re.compile("\r\n|[\r\x85\u2028\u2029]")
_FIRST_NEWLINE = re.compile("\r\n|\r|\n")

_NEWLINES_BY_TEXT: dict[str, Newline] = {nl.value: nl for nl in Newline}


class UnsupportedEncodingError(ValueError):
    """Raised when the bytes cannot be decoded in the selected encoding."""


@dataclasses.dataclass(frozen=True, slots=True)
class DecodedText:
    """Editor text decoded from a byte buffer.

    ``text`` always uses LF line endings.  ``newline`` is the line ending
    found first in the original data (LF if there was none), to be passed
    back to :func:`encode` on save.  ``detected`` is False when detection
    failed and UTF-8 was assumed.
    """

    text: str
    encoding: EncodingTag
    newline: Newline
    has_bom: bool
    detected: bool


def first_newline(text: str) -> Newline | None:
    """Return the first of LF, CR or CRLF that occurs in *text*, or None."""
    match = _FIRST_NEWLINE.search(text)
    if match is None:
        return None
    return _NEWLINES_BY_TEXT[match.group()]


def normalize_newlines(text: str) -> tuple[str, Newline | None]:
    """Convert every line break in *text* to LF.

    :returns: The normalized text and the first LF/CR/CRLF line ending of
        the input, or None if it had none.
    """
    return _LINE_BREAKS.sub("\n", text), first_newline(text)


def decode(byte_str: bytes | bytearray) -> DecodedText:
    """Detect the encoding of *byte_str* and decode it for editing.

    :raises UnsupportedEncodingError: If the data does not decode under the
        detected encoding, or under UTF-8 when detection failed.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    result = run_pipeline(data)
    detected = result.encoding is not None
    if result.encoding is None or result.codec is None:
        logger.debug("encoding undetermined, falling back to UTF-8")
        encoding = EncodingTag.UTF_8
        codec = lookup(encoding).python_codec
    else:
        encoding = result.encoding
        codec = result.codec

    try:
        text = data.decode(codec, errors="strict")
    except UnicodeDecodeError as e:
        msg = f"Unsupported text encoding: data is not valid {encoding.value}"
        raise UnsupportedEncodingError(msg) from e

    if text.startswith(_BOM_CHAR):
        text = text[1:]

    normalized, newline = normalize_newlines(text)
    return DecodedText(
        text=normalized,
        encoding=encoding,
        newline=newline or Newline.LF,
        has_bom=result.has_bom,
        detected=detected,
    )


def encode(
    text: str,
    encoding: EncodingTag,
    newline: Newline = Newline.LF,
    errors: str = "strict",
) -> bytes:
    """Encode LF-separated editor *text* for saving.

    UTF-8 is written without a BOM; UTF-16 and UTF-32 get the BOM their
    codec writes.  Pass ``errors="replace"`` to save with substitution
    characters when the encoding cannot represent all of *text*.

    :raises UnicodeEncodeError: If *errors* is ``"strict"`` and *text*
        contains characters *encoding* cannot represent.
    """
    if newline is not Newline.LF:
        text = text.replace("\n", newline.value)
    return lookup(encoding).encode(text, errors=errors)
