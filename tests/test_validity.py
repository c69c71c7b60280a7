from __future__ import annotations

from jpdetect.enums import EncodingTag
from jpdetect.pipeline.validity import filter_by_round_trip
from jpdetect.registry import EncodingInfo, get_candidates, get_round_trip_candidates


def _surviving_tags(data: bytes) -> list[EncodingTag]:
    return [enc.tag for enc in filter_by_round_trip(data, get_round_trip_candidates())]


def test_emoji_utf8_survives_only_as_utf8():
    assert _surviving_tags("😀".encode()) == [EncodingTag.UTF_8]


def test_ascii_survives_under_every_ascii_compatible_encoding():
    tags = _surviving_tags(b"hello")
    assert EncodingTag.UTF_8 in tags
    assert EncodingTag.SHIFT_JIS in tags
    assert EncodingTag.EUC_JP in tags
    assert EncodingTag.ISO_2022_JP in tags


def test_shift_jis_text_survives_under_shift_jis():
    tags = _surviving_tags("こんにちは".encode("shift_jis"))
    assert EncodingTag.SHIFT_JIS in tags
    assert EncodingTag.UTF_8 not in tags


def test_euc_jp_text_survives_under_euc_jp():
    tags = _surviving_tags("日本語".encode("euc_jp"))
    assert EncodingTag.EUC_JP in tags
    assert EncodingTag.UTF_8 not in tags


def test_bomless_utf16_never_survives():
    # The utf-16 codec adds a BOM on encode, so the bytes cannot match.
    survivors = filter_by_round_trip("ab".encode("utf-16-le"), get_candidates())
    assert EncodingTag.UTF_16 not in [enc.tag for enc in survivors]


def test_undecodable_data_has_no_survivors():
    assert _surviving_tags(b"\xff\xff\xff") == []


def test_no_candidates():
    assert filter_by_round_trip(b"hello", ()) == ()


def test_returns_tuple():
    assert isinstance(filter_by_round_trip(b"Hello", get_candidates()), tuple)


def test_annotations_are_evaluated():
    hints = filter_by_round_trip.__annotations__
    assert hints["data"] is bytes
    assert hints["candidates"] == tuple[EncodingInfo, ...]
