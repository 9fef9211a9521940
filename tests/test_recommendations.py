"""Tests for recommendation generation."""

import pytest

from seo_scoring.models import Issue, Recommendation
from seo_scoring.normalizers import normalize_issues
from seo_scoring.recommendations import (
    NO_RECOMMENDATION,
    PERFORMANCE_STRATEGY,
    TECHNICAL_STRATEGY,
    StepRule,
    generate_recommendations,
    group_by_category,
    matches_rule,
    select_steps,
    sort_by_severity,
    strategy_for,
)

META_STEP = 'Add or optimize meta title and description tags for all pages'
BROKEN_STEP = 'Fix all broken links and ensure proper internal linking structure'
IMAGE_STEP = 'Optimize images by compressing and resizing them appropriately'
SERVER_STEP = 'Improve server response time by optimizing server configuration and resources'


def make_issue(title='Issue', severity='medium', category=None, type=None):
    return Issue(
        title=title,
        description='',
        severity=severity,
        location='/',
        impact='',
        category=category,
        type=type,
    )


class TestGenerateRecommendations:
    """Test suite for generate_recommendations."""

    def test_fixture_recommendations(self, raw_issues):
        recommendations = generate_recommendations(raw_issues)

        assert [rec.title for rec in recommendations] == [
            'Fix Technical SEO Issues',
            'Improve Site Performance',
        ]

        technical, performance = recommendations
        assert technical.category == 'Technical'
        assert technical.impact == 4
        assert list(technical.steps) == [META_STEP, BROKEN_STEP]

        assert performance.category == 'Performance'
        assert performance.impact == 3
        assert list(performance.steps) == [IMAGE_STEP, SERVER_STEP]
        assert [r.title for r in performance.resources] == [
            'Google PageSpeed Insights',
            'Web.dev Performance Guides',
        ]

    def test_security_issues_have_no_recommendation(self):
        issues = [{'title': 'Mixed content', 'severity': 'critical', 'category': 'security'}]
        assert generate_recommendations(issues) == []

    @pytest.mark.parametrize("category", ['content', 'keywords', 'mobile', 'backlinks'])
    def test_other_categories_have_no_recommendation(self, category):
        assert generate_recommendations([{'severity': 'high', 'category': category}]) == []

    def test_uncategorized_issues_count_as_technical(self):
        recommendations = generate_recommendations([{'title': 'Mobile layout overflow'}])

        assert len(recommendations) == 1
        assert recommendations[0].title == 'Fix Technical SEO Issues'
        assert list(recommendations[0].steps) == [
            'Ensure your site is fully responsive and mobile-friendly'
        ]

    def test_fallback_steps_when_no_rule_matches(self):
        issues = [{'title': 'Slow scripts', 'severity': 'low', 'category': 'performance'}]
        recommendation = generate_recommendations(issues)[0]

        assert list(recommendation.steps) == list(PERFORMANCE_STRATEGY.fallback_steps)
        assert recommendation.impact == 1

    def test_category_matching_is_case_sensitive(self):
        assert generate_recommendations([{'category': 'Performance'}]) == []

    def test_empty_and_invalid_input(self):
        assert generate_recommendations([]) == []
        assert generate_recommendations(None) == []

    def test_impact_within_bounds(self):
        issues = [{'severity': 'critical', 'category': 'technical'}] * 20
        assert generate_recommendations(issues)[0].impact == 5

    def test_to_dict(self, raw_issues):
        data = generate_recommendations(raw_issues)[0].to_dict()
        assert set(data) == {'title', 'description', 'category', 'impact', 'steps', 'resources'}
        assert data['resources'][0]['title'] == "Google's SEO Starter Guide"


class TestRules:
    """Test suite for the step rule classifier."""

    def test_matches_issue_type(self):
        rule = StepRule(step='x', issue_types=('large-images',))
        assert matches_rule(make_issue(type='large-images'), rule)
        assert not matches_rule(make_issue(type='broken-links'), rule)

    def test_matches_title_keyword_case_insensitive(self):
        rule = StepRule(step='x', title_keywords=('meta',))
        assert matches_rule(make_issue(title='Duplicate META tags'), rule)
        assert not matches_rule(make_issue(title='Duplicate titles'), rule)

    def test_select_steps_keeps_rule_order(self):
        issues = [make_issue(title='Broken links'), make_issue(title='Missing meta')]
        steps = select_steps(issues, TECHNICAL_STRATEGY.rules, TECHNICAL_STRATEGY.fallback_steps)
        assert steps == [META_STEP, BROKEN_STEP]

    def test_select_steps_fallback(self):
        steps = select_steps([make_issue()], TECHNICAL_STRATEGY.rules, ('generic',))
        assert steps == ['generic']


class TestGrouping:
    """Test suite for grouping and ordering helpers."""

    def test_group_by_category_keeps_first_appearance(self, raw_issues):
        grouped = group_by_category(normalize_issues(raw_issues))
        assert list(grouped) == ['technical', 'performance', 'security']
        assert len(grouped['technical']) == 3

    def test_sort_by_severity_is_stable(self):
        first = make_issue(title='first', severity='low')
        second = make_issue(title='second', severity='critical')
        third = make_issue(title='third', severity='low')
        fourth = make_issue(title='fourth', severity='blocker')

        ordered = sort_by_severity([fourth, first, second, third])
        assert [issue.title for issue in ordered] == ['second', 'first', 'third', 'fourth']

    def test_strategy_for(self):
        assert strategy_for('performance') is PERFORMANCE_STRATEGY
        assert strategy_for('technical') is TECHNICAL_STRATEGY
        assert strategy_for('security') is NO_RECOMMENDATION
        assert strategy_for('unknown') is NO_RECOMMENDATION
        assert strategy_for(None) is NO_RECOMMENDATION


class TestRecommendationModel:
    """Test suite for the Recommendation model."""

    @pytest.mark.parametrize("impact,expected", [(0, 1), (3, 3), (9, 5), (-2, 1)])
    def test_impact_is_clamped(self, impact, expected):
        recommendation = Recommendation(title='t', description='d', category='c', impact=impact)
        assert recommendation.impact == expected

    def test_steps_become_tuple(self):
        recommendation = Recommendation(
            title='t', description='d', category='c', impact=2, steps=['a', 'b']
        )
        assert recommendation.steps == ('a', 'b')


class TestMalformedIssues:
    """Malformed issue fields never break recommendation generation."""

    def test_numeric_title_and_type(self):
        issues = [
            {'title': 404, 'severity': 'high', 'category': 'technical'},
            {'title': 'Missing meta', 'type': 500, 'severity': 'low', 'category': 'technical'},
        ]
        recommendation = generate_recommendations(issues)[0]

        assert recommendation.impact == 3
        assert list(recommendation.steps) == [META_STEP]

    def test_numeric_title_matches_no_rule(self):
        assert not matches_rule(make_issue(title=404), TECHNICAL_STRATEGY.rules[0])

    def test_unhashable_severity_sorts_last(self):
        odd = make_issue(title='odd', severity=['high'])
        low = make_issue(title='low', severity='low')

        assert [issue.title for issue in sort_by_severity([odd, low])] == ['low', 'odd']

    def test_unhashable_category_is_grouped(self):
        grouped = group_by_category([make_issue(category=['technical'])])
        assert list(grouped) == ["['technical']"]

    def test_unhashable_values_in_raw_issues(self):
        issues = [{'title': ['x'], 'severity': ['critical'], 'category': ['performance']}]
        assert generate_recommendations(issues) == []
