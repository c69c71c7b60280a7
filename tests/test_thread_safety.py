"""Thread-safety integration tests for concurrent detect() calls."""

from __future__ import annotations

import sys
import threading

from jpdetect import detect
from jpdetect.enums import EncodingTag

_SAMPLES: list[tuple[bytes, EncodingTag]] = [
    ("これはテストです。日本語のテキスト。".encode("shift_jis"), EncodingTag.SHIFT_JIS),
    ("これはテストです。日本語のテキスト。".encode("euc_jp"), EncodingTag.EUC_JP),
    ("これはテストです。日本語のテキスト。".encode("iso2022_jp"), EncodingTag.ISO_2022_JP),
    ("これはテストです。日本語のテキスト。".encode("utf-8"), EncodingTag.UTF_8),
    (b"\xff\xfe" + "テスト".encode("utf-16-le"), EncodingTag.UTF_16),
]


def _run_concurrent_detect(
    n_workers: int,
    iterations: int,
) -> list[str]:
    """Spawn *n_workers* threads per sample, each calling detect() *iterations* times.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(data: bytes, expected: EncodingTag) -> None:
        barrier.wait()
        for _ in range(iterations):
            tag = detect(data)
            if tag is not expected:
                errors.append(f"Expected {expected}, got {tag!r}")

    threads = []
    for _ in range(n_workers):
        for data, expected in _SAMPLES:
            t = threading.Thread(target=worker, args=(data, expected))
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_detect_no_corruption():
    """Multiple threads calling detect() simultaneously must not corrupt results."""
    errors = _run_concurrent_detect(n_workers=3, iterations=20)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_detect_high_concurrency():
    """Stress test with higher thread count to surface free-threading races."""
    errors = _run_concurrent_detect(n_workers=8, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_gil_status_diagnostic() -> None:
    """Report GIL status for visibility in CI logs."""
    if hasattr(sys, "_is_gil_enabled"):
        enabled = sys._is_gil_enabled()
        status = "DISABLED (free-threaded)" if not enabled else "enabled"
        print(f"\nPython {sys.version.split()[0]}: GIL {status}")
    else:
        print(f"\nPython {sys.version.split()[0]}: GIL always enabled (< 3.13)")
