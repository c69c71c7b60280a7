"""Stage 3: Legacy Japanese byte scan (Shift_JIS / EUC-JP / ISO-2022-JP).

A single forward pass classifies the data by the byte ranges each legacy
encoding uses.  Shift_JIS and EUC-JP share much of the 0xA1-0xEF range, so
the scan keeps an "EUC or Shift_JIS" hypothesis until a byte only one of
them allows turns up.

Every byte read past the first one of a step is a lookahead and is consumed:
it is not examined again by the next step.  A lookahead that runs off the
end of the data stops the scan with the hypothesis reached so far.
"""

from __future__ import annotations

import dataclasses

from jpdetect.enums import ScanHypothesis

_ESC = 0x1B
_SS2 = 0x8E


def _is_sjis_lead(byte: int) -> bool:
    """0x81-0x9F minus SS2: lead bytes that EUC-JP never uses."""
    return 0x81 <= byte <= 0x8D or 0x8F <= byte <= 0x9F


def _is_kana_or_kanji(byte: int) -> bool:
    """0xA1-0xDF: half-width kana in Shift_JIS, row bytes in EUC-JP."""
    return 0xA1 <= byte <= 0xDF


@dataclasses.dataclass(slots=True)
class _Cursor:
    """Bounds-checked reader over the scanned bytes."""

    data: bytes
    pos: int = 0

    def next(self) -> int | None:
        """Return the next byte and advance, or ``None`` at the end."""
        if self.pos >= len(self.data):
            return None
        byte = self.data[self.pos]
        self.pos += 1
        return byte


def _after_escape(cur: _Cursor) -> ScanHypothesis | None:
    """ESC $ B (new JIS), ESC $ @ (old JIS), or ESC K (NEC kanji-in)."""
    byte = cur.next()
    if byte == 0x24:  # '$'
        byte = cur.next()
        if byte == 0x42:  # 'B'
            return ScanHypothesis.JIS_NEW
        if byte == 0x40:  # '@'
            return ScanHypothesis.JIS_OLD
    elif byte == 0x4B:  # 'K'
        return ScanHypothesis.JIS_NEC
    return None


def _after_ss2(cur: _Cursor) -> ScanHypothesis | None:
    byte = cur.next()
    if byte is None:
        return None
    if 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xA0 or 0xE0 <= byte <= 0xFC:
        return ScanHypothesis.SHIFT_JIS
    if _is_kana_or_kanji(byte):
        return ScanHypothesis.AMBIGUOUS
    return None


def _resolve_run(cur: _Cursor, byte: int | None) -> ScanHypothesis:
    """Walk a run of high bytes until one of them settles the question.

    Starts at *byte* (already consumed) and keeps going while bytes are
    0x40 or above.  The byte that ends the run is consumed as well.  A byte
    is only classified when another byte follows it, so the last byte of
    the data never decides the run.
    """
    while byte is not None and byte >= 0x40:
        following = cur.next()
        if following is None:
            break
        if _is_sjis_lead(byte):
            return ScanHypothesis.SHIFT_JIS
        if 0xFD <= byte <= 0xFE:
            return ScanHypothesis.EUC
        byte = following
    return ScanHypothesis.AMBIGUOUS


def _after_kana_or_kanji(cur: _Cursor) -> ScanHypothesis | None:
    byte = cur.next()
    if byte is None:
        return None
    if 0xF0 <= byte <= 0xFE:
        return ScanHypothesis.EUC
    if _is_kana_or_kanji(byte):
        return ScanHypothesis.AMBIGUOUS
    if 0xE0 <= byte <= 0xEF:
        return _resolve_run(cur, byte)
    if byte <= 0x9F:
        return ScanHypothesis.SHIFT_JIS
    return None


def _after_sjis_high_lead(cur: _Cursor) -> ScanHypothesis | None:
    byte = cur.next()
    if byte is None:
        return None
    if 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xA0:
        return ScanHypothesis.SHIFT_JIS
    if 0xFD <= byte <= 0xFE:
        return ScanHypothesis.EUC
    if 0xA1 <= byte <= 0xFC:
        return ScanHypothesis.AMBIGUOUS
    return None


def scan_legacy_japanese(data: bytes) -> ScanHypothesis:
    """Classify *data* as Shift_JIS, EUC-JP or ISO-2022-JP by byte ranges.

    :param data: The raw byte data to examine.
    :returns: The final :class:`ScanHypothesis`.  ``ASCII`` means nothing
        Japanese-specific was seen; ``AMBIGUOUS`` means EUC-JP and Shift_JIS
        were never told apart.
    """
    cur = _Cursor(data)
    hypothesis = ScanHypothesis.ASCII

    while not hypothesis.is_terminal:
        byte = cur.next()
        if byte is None:
            break
        if byte == 0x00:
            continue

        if byte == _ESC:
            found = _after_escape(cur)
        elif _is_sjis_lead(byte):
            found = ScanHypothesis.SHIFT_JIS
        elif byte == _SS2:
            found = _after_ss2(cur)
        elif _is_kana_or_kanji(byte):
            found = _after_kana_or_kanji(cur)
        elif 0xF0 <= byte <= 0xFE:
            found = ScanHypothesis.EUC
        elif 0xE0 <= byte <= 0xEF:
            found = _after_sjis_high_lead(cur)
        else:
            found = None

        if found is not None:
            hypothesis = found

    return hypothesis
