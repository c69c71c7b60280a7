"""Fixed table of candidate encodings and their Python codecs.

Each :class:`EncodingInfo` doubles as the codec capability used by the
round-trip stage and by :mod:`jpdetect.document`.
"""

from __future__ import annotations

import dataclasses

from jpdetect.enums import EncodingTag


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """A supported encoding and the Python codec that implements it."""

    tag: EncodingTag
    python_codec: str

    @property
    def name(self) -> str:
        return self.tag.value

    def try_decode(self, data: bytes) -> str | None:
        """Decode *data* strictly, returning ``None`` if it is not valid."""
        try:
            return data.decode(self.python_codec, errors="strict")
        except UnicodeDecodeError:
            return None

    def encode(self, text: str, errors: str = "strict") -> bytes:
        """Encode *text* with this codec.

        :raises UnicodeEncodeError: If *errors* is ``"strict"`` and *text*
            holds characters the encoding cannot represent.
        """
        return text.encode(self.python_codec, errors=errors)


_CANDIDATES: tuple[EncodingInfo, ...] = (
    EncodingInfo(EncodingTag.SHIFT_JIS, "shift_jis"),
    EncodingInfo(EncodingTag.ISO_2022_JP, "iso2022_jp"),
    EncodingInfo(EncodingTag.EUC_JP, "euc_jp"),
    EncodingInfo(EncodingTag.UTF_8, "utf-8"),
    EncodingInfo(EncodingTag.UTF_16, "utf-16"),
    EncodingInfo(EncodingTag.UTF_32, "utf-32"),
)

# UTF-16 and UTF-32 are only reported from a BOM.  Their codecs write a BOM
# on encode, so BOM-less data can never round-trip under them.
_BOM_ONLY = frozenset({EncodingTag.UTF_16, EncodingTag.UTF_32})

_ROUND_TRIP_CANDIDATES: tuple[EncodingInfo, ...] = tuple(
    enc for enc in _CANDIDATES if enc.tag not in _BOM_ONLY
)

_BY_TAG: dict[EncodingTag, EncodingInfo] = {enc.tag: enc for enc in _CANDIDATES}


def get_candidates() -> tuple[EncodingInfo, ...]:
    """Return every encoding the detector can report."""
    return _CANDIDATES


def get_round_trip_candidates() -> tuple[EncodingInfo, ...]:
    """Return the encodings the round-trip stage checks BOM-less data against."""
    return _ROUND_TRIP_CANDIDATES


def lookup(tag: EncodingTag) -> EncodingInfo:
    """Return the registry entry for *tag*."""
    return _BY_TAG[tag]
