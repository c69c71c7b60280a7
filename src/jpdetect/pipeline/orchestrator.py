"""Pipeline orchestrator: runs the detection stages in priority order."""

from __future__ import annotations

import logging

from jpdetect.enums import EncodingTag
from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.bom import detect_bom
from jpdetect.pipeline.legacy import scan_legacy_japanese
from jpdetect.pipeline.utf8 import is_utf8_structure
from jpdetect.pipeline.validity import filter_by_round_trip
from jpdetect.registry import get_round_trip_candidates, lookup

logger = logging.getLogger(__name__)

_UTF8_RESULT = DetectionResult(
    encoding=EncodingTag.UTF_8, codec=lookup(EncodingTag.UTF_8).python_codec
)
_UNDETERMINED_RESULT = DetectionResult(encoding=None, codec=None)


def _result_for(tag: EncodingTag) -> DetectionResult:
    return DetectionResult(encoding=tag, codec=lookup(tag).python_codec)


def run_pipeline(data: bytes) -> DetectionResult:
    """Run the full detection pipeline.

    :param data: The raw byte data to analyze.
    :returns: The first confident :class:`DetectionResult`, or one with
        ``encoding=None`` when no supported encoding fits.
    """
    # Empty input decodes and re-encodes identically under every candidate.
    if not data:
        return _UTF8_RESULT

    # Stage 1: a BOM is authoritative.
    bom_result = detect_bom(data)
    if bom_result is not None:
        logger.debug("BOM found: %s", bom_result.codec)
        return bom_result

    # Stage 2: accept UTF-8 early when it is the only lossless candidate,
    # so UTF-8 text never reaches the legacy scan.
    survivors = filter_by_round_trip(data, get_round_trip_candidates())
    if [enc.tag for enc in survivors] == [EncodingTag.UTF_8]:
        logger.debug("round-trip estimation: UTF-8 (without BOM)")
        return _UTF8_RESULT

    # Stage 3: escape sequences and EUC-only byte ranges are decisive.
    # Shift_JIS is held back until UTF-8 has been ruled out.
    hypothesis = scan_legacy_japanese(data)
    verdict = hypothesis.verdict
    if verdict in (EncodingTag.ISO_2022_JP, EncodingTag.EUC_JP):
        logger.debug("legacy scan: %s (%s)", verdict.value, hypothesis.value)
        return _result_for(verdict)

    # Stage 4: UTF-8 bit-pattern check.
    if is_utf8_structure(data):
        logger.debug("bit-pattern estimation: UTF-8 (without BOM)")
        return _UTF8_RESULT

    # Stage 5: Shift_JIS is the least certain verdict; its byte ranges
    # overlap with binary and damaged data.
    if verdict is EncodingTag.SHIFT_JIS:
        logger.debug("legacy scan: Shift_JIS")
        return _result_for(verdict)

    logger.debug("could not determine the encoding of %d bytes", len(data))
    return _UNDETERMINED_RESULT
