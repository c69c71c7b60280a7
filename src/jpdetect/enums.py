"""Enumerations for jpdetect."""

import enum


class EncodingTag(enum.Enum):
    """The closed set of encodings the detector can report.

    Values are the IANA charset names.
    """

    UTF_8 = "UTF-8"
    UTF_16 = "UTF-16"
    UTF_32 = "UTF-32"
    SHIFT_JIS = "Shift_JIS"
    ISO_2022_JP = "ISO-2022-JP"
    EUC_JP = "EUC-JP"

    @property
    def label(self) -> str:
        """Short name shown in an editor status bar."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value


_LABELS: dict[EncodingTag, str] = {
    EncodingTag.UTF_8: "UTF-8",
    EncodingTag.UTF_16: "UTF-16",
    EncodingTag.UTF_32: "UTF-32",
    EncodingTag.SHIFT_JIS: "SJIS",
    EncodingTag.ISO_2022_JP: "JIS",
    EncodingTag.EUC_JP: "EUC",
}


class ScanHypothesis(enum.Enum):
    """State of the legacy Japanese byte scan.

    ``ASCII`` and ``AMBIGUOUS`` are the only non-terminal states; the scan
    stops as soon as any other member is reached.
    """

    ASCII = "ascii"
    AMBIGUOUS = "euc-or-sjis"
    SHIFT_JIS = "sjis"
    EUC = "euc"
    JIS_NEW = "jis-new"
    JIS_OLD = "jis-old"
    JIS_NEC = "jis-nec"

    @property
    def is_terminal(self) -> bool:
        return self not in (ScanHypothesis.ASCII, ScanHypothesis.AMBIGUOUS)

    @property
    def verdict(self) -> EncodingTag | None:
        """The encoding this hypothesis settles on, or ``None`` for pure ASCII."""
        return _VERDICTS[self]


_VERDICTS: dict[ScanHypothesis, EncodingTag | None] = {
    ScanHypothesis.ASCII: None,
    # An unresolved EUC-or-SJIS pair is read as EUC-JP.
    ScanHypothesis.AMBIGUOUS: EncodingTag.EUC_JP,
    ScanHypothesis.SHIFT_JIS: EncodingTag.SHIFT_JIS,
    ScanHypothesis.EUC: EncodingTag.EUC_JP,
    ScanHypothesis.JIS_NEW: EncodingTag.ISO_2022_JP,
    ScanHypothesis.JIS_OLD: EncodingTag.ISO_2022_JP,
    ScanHypothesis.JIS_NEC: EncodingTag.ISO_2022_JP,
}


class Newline(enum.Enum):
    """Line ending conventions recognised when loading and saving text."""

    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"

    @property
    def label(self) -> str:
        return self.name
