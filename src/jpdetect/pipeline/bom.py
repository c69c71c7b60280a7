"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from jpdetect.enums import EncodingTag
from jpdetect.pipeline import DetectionResult

# Checked in order.  FF FE is looked at before deciding on the four-byte
# UTF-32-LE mark, and 00 00 FE FF comes last.
_BOMS: tuple[tuple[bytes, EncodingTag, str], ...] = (
    (b"\xfe\xff", EncodingTag.UTF_16, "utf-16-be"),
    (b"\xff\xfe\x00\x00", EncodingTag.UTF_32, "utf-32-le"),
    (b"\xff\xfe", EncodingTag.UTF_16, "utf-16-le"),
    (b"\xef\xbb\xbf", EncodingTag.UTF_8, "utf-8-sig"),
    (b"\x00\x00\xfe\xff", EncodingTag.UTF_32, "utf-32-be"),
)


def detect_bom(data: bytes) -> DetectionResult | None:
    """Check for a BOM at the start of data. Returns result or None."""
    for bom_bytes, tag, codec in _BOMS:
        if data.startswith(bom_bytes):
            return DetectionResult(encoding=tag, codec=codec, has_bom=True)
    return None
