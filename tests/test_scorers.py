"""Tests for the metric scorers."""

import pytest

from seo_scoring.config import (
    ContentScoringConfig,
    OptimalRange,
    PerformanceThresholds,
    TechnicalScoringConfig,
)
from seo_scoring.scorers import (
    calculate_content_score,
    calculate_grade,
    calculate_keyword_score,
    calculate_performance_score,
    calculate_technical_score,
    get_score_rating,
    score_optimal_range,
    score_timing,
)


class TestTechnicalScore:
    """Test suite for calculate_technical_score."""

    def test_missing_metric_is_inverted(self):
        """A 'missing' percentage scores as the percentage present."""
        assert calculate_technical_score({'missingTitlesPercent': 30}) == pytest.approx(70)

    def test_single_present_metric_ignores_other_weights(self):
        """Only present metrics contribute to the weight denominator."""
        assert calculate_technical_score({'hasCanonicalPercent': 42}) == pytest.approx(42)

    def test_all_metrics(self):
        seo_health = {
            'missingTitlesPercent': 10,
            'missingDescriptionsPercent': 20,
            'hasSchemaMarkupPercent': 50,
            'hasCanonicalPercent': 100,
            'hasMobileViewportPercent': 60,
        }
        assert calculate_technical_score(seo_health) == pytest.approx(76)

    def test_unrecognized_keys_score_zero(self):
        assert calculate_technical_score({'pagesCrawled': 120}) == 0

    def test_empty_and_none_input(self):
        assert calculate_technical_score(None) == 0
        assert calculate_technical_score({}) == 0
        assert calculate_technical_score([]) == 0

    def test_non_numeric_values_are_skipped(self):
        seo_health = {'hasCanonicalPercent': 'n/a', 'hasSchemaMarkupPercent': 80}
        assert calculate_technical_score(seo_health) == pytest.approx(80)

    def test_only_final_score_is_clamped(self):
        """Out-of-range sub-scores are averaged as is; only the result is clamped."""
        seo_health = {'missingTitlesPercent': 150, 'hasCanonicalPercent': 100}
        assert calculate_technical_score(seo_health) == pytest.approx(25)
        assert 0 <= calculate_technical_score({'hasCanonicalPercent': 250}) <= 100

    def test_custom_weights(self):
        config = TechnicalScoringConfig(
            weights={'hasCanonicalPercent': 3.0, 'missingTitlesPercent': 1.0}
        )
        seo_health = {'hasCanonicalPercent': 100, 'missingTitlesPercent': 100}
        assert calculate_technical_score(seo_health, config) == pytest.approx(75)


class TestContentScore:
    """Test suite for calculate_content_score."""

    def test_title_in_optimal_range(self):
        assert calculate_content_score({'averageTitleLength': 55}) == pytest.approx(100)

    def test_title_below_range_is_prorated(self):
        assert calculate_content_score({'averageTitleLength': 25}) == pytest.approx(50)

    def test_content_above_range_is_prorated(self):
        assert calculate_content_score({'averageContentLength': 4000}) == pytest.approx(50)

    def test_range_bounds_are_inclusive(self):
        assert calculate_content_score({'averageDescriptionLength': 140}) == pytest.approx(100)
        assert calculate_content_score({'averageDescriptionLength': 160}) == pytest.approx(100)

    def test_weighted_combination(self):
        content_stats = {
            'averageTitleLength': 55,  # 100, weight 0.25
            'averageDescriptionLength': 70,  # 50, weight 0.25
            'averageContentLength': 1000,  # 100, weight 0.5
        }
        assert calculate_content_score(content_stats) == pytest.approx(87.5)

    def test_partial_combination_renormalizes(self):
        content_stats = {'averageTitleLength': 25, 'averageContentLength': 4000}
        assert calculate_content_score(content_stats) == pytest.approx(50)

    def test_negative_sub_score_is_not_clamped(self):
        content_stats = {'averageTitleLength': -50, 'averageContentLength': 1000}
        # (-100 * 0.25 + 100 * 0.5) / 0.75
        assert calculate_content_score(content_stats) == pytest.approx(100 / 3)

    def test_none_input(self):
        assert calculate_content_score(None) == 0

    def test_metric_without_range_is_ignored(self):
        config = ContentScoringConfig(
            weights={'averageTitleLength': 1.0, 'averageH1Length': 1.0},
            optimal_ranges={'averageTitleLength': OptimalRange(min=50, max=60)},
        )
        content_stats = {'averageTitleLength': 55, 'averageH1Length': 5}
        assert calculate_content_score(content_stats, config) == pytest.approx(100)

    def test_score_optimal_range(self):
        optimal = OptimalRange(min=800, max=2000)
        assert score_optimal_range(400, optimal) == pytest.approx(50)
        assert score_optimal_range(1500, optimal) == 100
        assert score_optimal_range(8000, optimal) == pytest.approx(25)


class TestKeywordScore:
    """Test suite for calculate_keyword_score."""

    def test_average_importance(self):
        keyword_analysis = {
            'seo audit': {'importanceScore': 80},
            'site speed': {'importanceScore': 40},
            'backlinks': {},
        }
        assert calculate_keyword_score(keyword_analysis) == pytest.approx(40)

    def test_empty_and_none(self):
        assert calculate_keyword_score({}) == 0
        assert calculate_keyword_score(None) == 0

    def test_malformed_entries_count_as_zero(self):
        keyword_analysis = {'a': None, 'b': {'importanceScore': 'high'}, 'c': {'importanceScore': 90}}
        assert calculate_keyword_score(keyword_analysis) == pytest.approx(30)


class TestPerformanceScore:
    """Test suite for calculate_performance_score."""

    @pytest.mark.parametrize("value,expected", [
        (500, 100),
        (1000, 100),  # at good
        (1500, 62.5),
        (2000, 50),  # at medium
        (2500, 37.5),
        (3000, 25),  # at poor
        (4500, 12.5),
        (6000, 0),  # double poor
        (20000, 0),
    ])
    def test_dom_content_loaded_banding(self, value, expected):
        assert calculate_performance_score({'domContentLoaded': value}) == pytest.approx(expected)

    def test_weighted_combination(self):
        performance = {'domContentLoaded': 1000, 'load': 4000}
        assert calculate_performance_score(performance) == pytest.approx(75)

    def test_load_thresholds(self):
        assert calculate_performance_score({'load': 9000}) == pytest.approx(12.5)

    def test_none_and_unknown(self):
        assert calculate_performance_score(None) == 0
        assert calculate_performance_score({'timeToInteractive': 1200}) == 0

    def test_score_timing(self):
        thresholds = PerformanceThresholds(good=2500, medium=4000, poor=6000)
        assert score_timing(2500, thresholds) == 100
        assert score_timing(4000, thresholds) == pytest.approx(50)
        assert score_timing(6000, thresholds) == pytest.approx(25)
        assert score_timing(12000, thresholds) == pytest.approx(0)


class TestScoresStayInRange:
    """All scorers return values within [0, 100]."""

    @pytest.mark.parametrize("seo_health", [
        {'missingTitlesPercent': -40},
        {'missingTitlesPercent': 400},
        {'hasSchemaMarkupPercent': -10, 'hasCanonicalPercent': 1000},
    ])
    def test_technical(self, seo_health):
        assert 0 <= calculate_technical_score(seo_health) <= 100

    @pytest.mark.parametrize("content_stats", [
        {'averageTitleLength': -5},
        {'averageContentLength': 0},
        {'averageDescriptionLength': 10 ** 6},
    ])
    def test_content(self, content_stats):
        assert 0 <= calculate_content_score(content_stats) <= 100

    @pytest.mark.parametrize("performance", [
        {'firstPaint': -100},
        {'largestContentfulPaint': 10 ** 7},
        {'firstContentfulPaint': 0},
    ])
    def test_performance(self, performance):
        assert 0 <= calculate_performance_score(performance) <= 100

    def test_keyword(self):
        assert calculate_keyword_score({'a': {'importanceScore': 500}}) == 100
        assert calculate_keyword_score({'a': {'importanceScore': -20}}) == 0


class TestGradeAndRating:
    """Tests for letter grades and descriptive ratings."""

    @pytest.mark.parametrize("score,grade", [
        (100, 'A+'), (97, 'A+'), (95, 'A'), (92, 'A-'), (88, 'B+'),
        (80, 'B-'), (74, 'C'), (70, 'C-'), (65, 'D'), (60, 'D-'), (59.9, 'F'), (0, 'F'),
    ])
    def test_calculate_grade(self, score, grade):
        assert calculate_grade(score) == grade

    @pytest.mark.parametrize("score,rating", [
        (95, 'Excellent'), (85, 'Good'), (72, 'Satisfactory'),
        (61, 'Needs Improvement'), (45, 'Poor'), (39, 'Critical'),
    ])
    def test_get_score_rating(self, score, rating):
        assert get_score_rating(score) == rating
