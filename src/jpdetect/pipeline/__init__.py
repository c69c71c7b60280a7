"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from jpdetect.enums import EncodingTag


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single encoding detection result.

    ``encoding`` is ``None`` when no supported encoding fits the data.
    ``codec`` names the Python codec that decodes the data byte-exactly,
    which for BOM results keeps the byte order of the BOM that was found.
    """

    encoding: EncodingTag | None
    codec: str | None
    has_bom: bool = False

    def to_dict(self) -> dict[str, str | bool | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'codec'``, and ``'bom'`` keys.
        """
        return {
            "encoding": self.encoding.value if self.encoding is not None else None,
            "codec": self.codec,
            "bom": self.has_bom,
        }
