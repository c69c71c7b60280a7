"""Shared test fixtures."""

from __future__ import annotations

import pytest

from jpdetect.enums import EncodingTag

_TEXT = "こんにちは、世界。日本語のテキストです。"


@pytest.fixture(scope="session")
def encoded_samples() -> dict[EncodingTag, bytes]:
    """The same Japanese sentence in every BOM-less encoding the detector reports."""
    return {
        EncodingTag.UTF_8: _TEXT.encode("utf-8"),
        EncodingTag.SHIFT_JIS: _TEXT.encode("shift_jis"),
        EncodingTag.EUC_JP: _TEXT.encode("euc_jp"),
        EncodingTag.ISO_2022_JP: _TEXT.encode("iso2022_jp"),
    }
