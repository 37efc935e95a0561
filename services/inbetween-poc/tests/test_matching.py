# tests/test_matching.py
import pytest
from conftest import make_stroke
from inbetween.config import TweenSettings
from inbetween.animate.stroke_engine.matching import match_cost, match_strokes


def _assert_total(result, len_a, len_b):
    firsts = [ia for ia, _ in result.pairs]
    seconds = [ib for _, ib in result.pairs]
    assert sorted(firsts + result.unmatched_a) == list(range(len_a))
    assert sorted(seconds + result.unmatched_b) == list(range(len_b))


def test_match_cost_centroid_distance_only_for_equal_lengths(settings):
    a = make_stroke([(0, 0), (10, 0)])
    b = make_stroke([(0, 30), (10, 30)])
    assert match_cost(a, b, settings) == pytest.approx(30.0)


def test_match_cost_includes_length_term(settings):
    a = make_stroke([(0, 0), (10, 0)])
    b = make_stroke([(-10, 0), (20, 0)])
    # Same centroid, lengths 10 vs 30
    assert match_cost(a, b, settings) == pytest.approx(2.0)


def test_match_cost_floors_lengths_at_one(settings):
    a = make_stroke([(0, 0), (0, 0)])
    b = make_stroke([(0, 0), (0.5, 0)])
    assert match_cost(a, b, settings) == pytest.approx(0.25)


def test_match_cost_weight_is_configurable():
    a = make_stroke([(0, 0), (10, 0)])
    b = make_stroke([(-10, 0), (20, 0)])
    assert match_cost(a, b, TweenSettings(length_weight=1.0)) == pytest.approx(20.0)


def test_match_cost_symmetric(settings):
    a = make_stroke([(0, 0), (10, 4), (3, 9)])
    b = make_stroke([(50, 5), (60, 0)])
    assert match_cost(a, b, settings) == pytest.approx(match_cost(b, a, settings))


def test_match_pairs_nearest_strokes(settings):
    a = [make_stroke([(0, 0), (10, 0)]), make_stroke([(0, 100), (10, 100)])]
    b = [make_stroke([(0, 98), (10, 98)]), make_stroke([(0, 3), (10, 3)])]
    result = match_strokes(a, b, settings)
    assert result.pairs == [(0, 1), (1, 0)]
    assert result.unmatched_a == []
    assert result.unmatched_b == []


def test_match_more_strokes_in_a(settings):
    a = [make_stroke([(0, y), (10, y)]) for y in (0, 50, 100)]
    b = [make_stroke([(0, 52), (10, 52)])]
    result = match_strokes(a, b, settings)
    # Greedy: A[0] is scanned first and takes the only B stroke
    assert result.pairs == [(0, 0)]
    assert result.unmatched_a == [1, 2]
    _assert_total(result, 3, 1)


def test_match_more_strokes_in_b(settings):
    a = [make_stroke([(0, 0), (10, 0)])]
    b = [make_stroke([(0, y), (10, y)]) for y in (80, 1, 40)]
    result = match_strokes(a, b, settings)
    assert result.pairs == [(0, 1)]
    assert result.unmatched_b == [0, 2]
    _assert_total(result, 1, 3)


def test_match_ties_pick_first_b(settings):
    a = [make_stroke([(0, 0), (10, 0)])]
    b = [make_stroke([(0, 10), (10, 10)]), make_stroke([(0, -10), (10, -10)])]
    assert match_strokes(a, b, settings).pairs == [(0, 0)]


def test_match_empty_sides(settings):
    b = [make_stroke([(0, 0), (1, 1)])]
    result = match_strokes([], b, settings)
    assert result.pairs == [] and result.unmatched_a == [] and result.unmatched_b == [0]
    result = match_strokes(b, [], settings)
    assert result.pairs == [] and result.unmatched_a == [0] and result.unmatched_b == []


def test_match_deterministic(settings):
    a = [make_stroke([(i * 7 % 13, i), (i * 3, i * 5 % 11)]) for i in range(6)]
    b = [make_stroke([(i * 5 % 17, i * 2), (i, i * 7 % 9)]) for i in range(4)]
    first = match_strokes(a, b, settings)
    second = match_strokes(a, b, settings)
    assert first == second
    _assert_total(first, 6, 4)
