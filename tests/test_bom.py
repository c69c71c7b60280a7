from jpdetect.enums import EncodingTag
from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.bom import detect_bom


def test_utf8_bom():
    data = b"\xef\xbb\xbfHello"
    result = detect_bom(data)
    assert result == DetectionResult(EncodingTag.UTF_8, "utf-8-sig", True)


def test_utf16_be_bom():
    data = b"\xfe\xff\x00H\x00e\x00l\x00l\x00o"
    result = detect_bom(data)
    assert result == DetectionResult(EncodingTag.UTF_16, "utf-16-be", True)


def test_utf16_le_bom():
    data = b"\xff\xfeH\x00e\x00l\x00l\x00o\x00"
    result = detect_bom(data)
    assert result == DetectionResult(EncodingTag.UTF_16, "utf-16-le", True)


def test_utf32_le_bom():
    data = b"\xff\xfe\x00\x00" + b"\x48\x00\x00\x00"
    result = detect_bom(data)
    assert result == DetectionResult(EncodingTag.UTF_32, "utf-32-le", True)


def test_utf32_be_bom():
    data = b"\x00\x00\xfe\xff" + b"\x00\x00\x00\x48"
    result = detect_bom(data)
    assert result == DetectionResult(EncodingTag.UTF_32, "utf-32-be", True)


def test_no_bom():
    assert detect_bom(b"Hello, world!") is None


def test_empty_input():
    assert detect_bom(b"") is None


def test_too_short_for_bom():
    assert detect_bom(b"\xef") is None
    assert detect_bom(b"\xef\xbb") is None
    assert detect_bom(b"\x00\x00\xfe") is None


def test_ff_fe_without_two_zero_bytes_is_utf16():
    result = detect_bom(b"\xff\xfe\x00")
    assert result is not None
    assert result.encoding is EncodingTag.UTF_16


def test_utf32_le_bom_ignores_payload_alignment():
    # FF FE 00 00 is UTF-32 no matter how many bytes follow.
    result = detect_bom(b"\xff\xfe\x00\x000\x00")
    assert result is not None
    assert result.encoding is EncodingTag.UTF_32


def test_fe_ff_wins_over_trailing_zero_bytes():
    result = detect_bom(b"\xfe\xff\x00\x00")
    assert result is not None
    assert result.encoding is EncodingTag.UTF_16


def test_bom_later_in_data_is_ignored():
    assert detect_bom(b"abc\xef\xbb\xbf") is None
