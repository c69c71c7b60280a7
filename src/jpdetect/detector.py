"""UniversalDetector: feed a file in chunks, detect on close."""

from __future__ import annotations

from jpdetect.pipeline import DetectionResult
from jpdetect.pipeline.bom import detect_bom
from jpdetect.pipeline.orchestrator import run_pipeline

_NONE_RESULT = DetectionResult(encoding=None, codec=None)

# Longest BOM the detector recognises.
_BOM_CHECK_BYTES = 4


class UniversalDetector:
    """Streaming character encoding detector.

    Implements a feed/close pattern for callers that read a file in chunks.
    Apart from a BOM, every stage needs the whole buffer, so detection
    happens in :meth:`close`.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result: DetectionResult | None = None
        self._bom_checked = False

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._done:
            return
        self._buffer.extend(byte_str)
        self._try_bom()

    def _try_bom(self) -> None:
        # The BOM check needs four bytes: FF FE alone may still become the
        # UTF-32-LE mark.
        if self._bom_checked or len(self._buffer) < _BOM_CHECK_BYTES:
            return
        self._bom_checked = True
        bom_result = detect_bom(bytes(self._buffer[:_BOM_CHECK_BYTES]))
        if bom_result is not None:
            self._result = bom_result
            self._done = True

    def close(self) -> DetectionResult:
        """Finalize detection and return the result.

        Runs the full detection pipeline on the buffered data unless a BOM
        already settled it.
        """
        if not self._closed:
            self._closed = True
            if self._result is None:
                self._result = run_pipeline(bytes(self._buffer))
            self._done = True
        return self.result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result = None
        self._bom_checked = False

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def result(self) -> DetectionResult:
        """The detection result, undetermined until settled."""
        if self._result is not None:
            return self._result
        return _NONE_RESULT
