import time

import pytest

from DP4BioInfo.seq_alignment import ScoringPolicy, align_global, align_local

U = "ATATAGGGAGATATAGAGA"
V = "AGAGGGGTTATAAGGGAGAG"
V_LONG = "AGAGGGGTTATAAGGGAGAGGAGT"

POLICY = ScoringPolicy(match=5, mismatch=-3, gap=-4)
ROUNDS = 20

pytestmark = pytest.mark.benchmark


def _timed(fn, *args):
    """Run `fn` ROUNDS times; return the last result and the mean seconds per call"""
    start = time.perf_counter()
    for _ in range(ROUNDS):
        result = fn(*args)
    elapsed = time.perf_counter() - start
    return result, elapsed / ROUNDS


def test_align_global_timing(capsys):
    (score, _), per_call = _timed(align_global, U, V, POLICY)
    assert score[score.rows - 1, score.cols - 1] == 36
    assert per_call > 0
    with capsys.disabled():
        print(f"\nalign_global {len(U)}x{len(V)}: {per_call * 1e3:.3f} ms/call")


def test_align_local_timing(capsys):
    (score, _), per_call = _timed(align_local, U, V, POLICY)
    assert score.max() == 48
    assert per_call > 0
    with capsys.disabled():
        print(f"\nalign_local {len(U)}x{len(V)}: {per_call * 1e3:.3f} ms/call")


def test_align_global_longer_subject_is_stable():
    first, _ = align_global(U, V_LONG, POLICY)
    (score, _), per_call = _timed(align_global, U, V_LONG, POLICY)
    assert score == first
    assert score.shape == (len(U) + 1, len(V_LONG) + 1)
    assert per_call > 0
