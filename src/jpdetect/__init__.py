"""Character encoding detector for Japanese text files.

Tells UTF-8/16/32 (with or without BOM) apart from Shift_JIS, EUC-JP and
ISO-2022-JP so an editor can decode a file before showing it.
"""

from __future__ import annotations

import logging

from jpdetect.detector import UniversalDetector
from jpdetect.document import DecodedText, decode, encode
from jpdetect.enums import EncodingTag, Newline
from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "DecodedText",
    "DetectionResult",
    "EncodingTag",
    "Newline",
    "UniversalDetector",
    "decode",
    "detect",
    "detect_result",
    "encode",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def detect_result(byte_str: bytes | bytearray) -> DetectionResult:
    """Detect the encoding of the given byte string.

    :returns: A :class:`DetectionResult`; its ``encoding`` is ``None`` when
        no supported encoding fits the data.
    """
    data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
    return run_pipeline(data)


def detect(byte_str: bytes | bytearray) -> EncodingTag | None:
    """Return the encoding of *byte_str*, or ``None`` if undetermined.

    Empty input is reported as UTF-8.
    """
    return detect_result(byte_str).encoding
