"""Tests for feature summaries."""

import pytest

from sound_profile.collector import CollectedFeatures
from sound_profile.utils.aggregation import (
    EMPTY_SUMMARY,
    FeatureAggregator,
    Summary,
    percentile90_index,
    silence_ratio,
    summarize,
    summarize_all,
)


def test_empty_series_summarizes_to_zero():
    summary = summarize([])
    assert summary.mean == 0
    assert summary.percentile90 == 0
    assert summary == Summary()


def test_single_value():
    summary = summarize([5.0])
    assert summary.mean == 5.0
    assert summary.percentile90 == 5.0
    assert summary.count == 1


def test_percentile_is_nearest_rank():
    """floor(0.9 * 10) = 9 selects the largest of ten values."""
    summary = summarize(list(range(10)))
    assert summary.mean == pytest.approx(4.5)
    assert summary.median == pytest.approx(4.5)
    assert summary.percentile90 == 9


def test_percentile_ignores_order():
    assert summarize([3.0, 1.0, 2.0]).percentile90 == 3.0
    assert summarize([0.5, 0.1, 0.9, 0.3, 0.7]).percentile90 == 0.9


def test_percentile_index_is_clamped():
    for length in range(1, 200):
        index = percentile90_index(length)
        assert 0 <= index <= length - 1


def test_percentile_index_rejects_empty():
    with pytest.raises(ValueError):
        percentile90_index(0)


def test_mean_within_range():
    values = [2.5, -1.0, 7.25, 3.0, 0.0, 4.5]
    summary = summarize(values)
    assert min(values) <= summary.mean <= max(values)


def test_summarize_accepts_generators():
    summary = summarize(x * 2.0 for x in range(5))
    assert summary.mean == pytest.approx(4.0)


def test_silence_ratio():
    assert silence_ratio([]) == 0.0
    assert silence_ratio([1.0, 0.0, 1.0, 1.0]) == pytest.approx(0.75)
    assert silence_ratio([0.0, 0.0]) == 0.0


def test_summarize_all_keys_summaries_by_series_name():
    summaries = summarize_all({"hfc": [1.0, 3.0], "flux": []})
    assert summaries == {"hfc": summarize([1.0, 3.0]), "flux": EMPTY_SUMMARY}
    assert summarize_all({}) == {}


def test_aggregator_separates_special_series():
    """Silence becomes a ratio and dynamic complexity is passed through."""
    collected = CollectedFeatures(
        series={
            "hfc": [1.0, 3.0],
            "silence": [1.0, 0.0],
            "dynamic_complexity": [4.2],
            "flux": [],
        },
        frame_count=2,
        sample_rate=44100,
    )

    aggregated = FeatureAggregator().aggregate(collected)

    assert set(aggregated.summaries) == {"hfc", "flux"}
    assert aggregated.summary("hfc").mean == pytest.approx(2.0)
    assert aggregated.summary("flux") == EMPTY_SUMMARY
    assert aggregated.summary("never_collected") == EMPTY_SUMMARY
    assert aggregated.silence_ratio == pytest.approx(0.5)
    assert aggregated.dynamic_complexity == [4.2]
    assert aggregated.frame_count == 2


def test_aggregator_summaries_match_summarize_all():
    series = {"hfc": [5.0, 1.0, 3.0], "centroid": [200.0], "silence": [0.0]}
    collected = CollectedFeatures(series=series, frame_count=3, sample_rate=44100)

    aggregated = FeatureAggregator().aggregate(collected)

    expected = summarize_all({"hfc": series["hfc"], "centroid": series["centroid"]})
    assert aggregated.summaries == expected
