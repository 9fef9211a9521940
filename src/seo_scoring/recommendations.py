"""Turn categorized audit issues into prioritized recommendations.

Issues are grouped by category and ranked by severity. Each category is
dispatched to a RecommendationStrategy that picks remediation steps from a
small rule table and computes an impact score. Categories without a
strategy (content, mobile, security, ...) produce no recommendation.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from seo_scoring.constants import DEFAULT_ISSUE_CATEGORY, SEVERITY_WEIGHTS
from seo_scoring.issue_scoring import calculate_impact_score
from seo_scoring.logging_config import get_logger
from seo_scoring.models import Category, Issue, Recommendation, Resource
from seo_scoring.normalizers import normalize_issues

logger = get_logger(__name__)


@dataclass(frozen=True)
class StepRule:
    """A remediation step triggered by an issue type or a title keyword."""

    step: str
    issue_types: Tuple[str, ...] = ()
    title_keywords: Tuple[str, ...] = ()


def matches_rule(issue: Issue, rule: StepRule) -> bool:
    """True when the issue's type is listed or its title contains a keyword (case-insensitive)."""
    issue_type = str(issue.type or '').lower()
    title = str(issue.title or '').lower()
    if issue_type and issue_type in rule.issue_types:
        return True
    return any(keyword in title for keyword in rule.title_keywords)


def select_steps(
    issues: Sequence[Issue],
    rules: Sequence[StepRule],
    fallback_steps: Sequence[str],
) -> List[str]:
    """Steps for every rule matched by at least one issue, in rule order.

    Falls back to the generic steps when no rule matches.
    """
    steps = [
        rule.step for rule in rules
        if any(matches_rule(issue, rule) for issue in issues)
    ]
    return steps or list(fallback_steps)


@dataclass(frozen=True)
class RecommendationStrategy:
    """Builds the recommendation for one issue category."""

    title: str
    description: str
    label: str
    rules: Tuple[StepRule, ...]
    fallback_steps: Tuple[str, ...]
    resources: Tuple[Resource, ...]

    def build(self, issues: Sequence[Issue]) -> Optional[Recommendation]:
        if not issues:
            return None
        return Recommendation(
            title=self.title,
            description=self.description,
            category=self.label,
            impact=calculate_impact_score(issues),
            steps=tuple(select_steps(issues, self.rules, self.fallback_steps)),
            resources=self.resources,
        )


class NoRecommendation:
    """Strategy for categories that have no recommendation rules."""

    def build(self, issues: Sequence[Issue]) -> Optional[Recommendation]:
        return None


PERFORMANCE_STRATEGY = RecommendationStrategy(
    title='Improve Site Performance',
    description='Enhance site speed and user experience by addressing performance issues',
    label='Performance',
    rules=(
        StepRule(
            step='Optimize images by compressing and resizing them appropriately',
            issue_types=('large-images',),
            title_keywords=('image',),
        ),
        StepRule(
            step='Eliminate render-blocking resources by deferring non-critical JavaScript and CSS',
            issue_types=('render-blocking',),
            title_keywords=('render',),
        ),
        StepRule(
            step='Improve server response time by optimizing server configuration and resources',
            issue_types=('server-response',),
            title_keywords=('ttfb',),
        ),
    ),
    fallback_steps=(
        'Minimize and compress CSS and JavaScript files',
        'Enable browser caching for static assets',
        'Consider using a Content Delivery Network (CDN)',
    ),
    resources=(
        Resource(title='Google PageSpeed Insights', url='https://pagespeed.web.dev/'),
        Resource(title='Web.dev Performance Guides', url='https://web.dev/learn/#performance'),
    ),
)

TECHNICAL_STRATEGY = RecommendationStrategy(
    title='Fix Technical SEO Issues',
    description='Resolve technical issues that may be hurting your search engine visibility',
    label='Technical',
    rules=(
        StepRule(
            step='Add or optimize meta title and description tags for all pages',
            issue_types=('missing-meta',),
            title_keywords=('meta',),
        ),
        StepRule(
            step='Fix all broken links and ensure proper internal linking structure',
            issue_types=('broken-links',),
            title_keywords=('broken',),
        ),
        StepRule(
            step='Ensure your site is fully responsive and mobile-friendly',
            issue_types=('mobile-friendly',),
            title_keywords=('mobile',),
        ),
    ),
    fallback_steps=(
        'Implement proper HTML structure with semantic elements',
        'Ensure all pages have unique, descriptive titles and meta descriptions',
        'Create and submit an XML sitemap to search engines',
    ),
    resources=(
        Resource(
            title="Google's SEO Starter Guide",
            url='https://developers.google.com/search/docs/fundamentals/seo-starter-guide',
        ),
        Resource(title='Technical SEO Checklist', url='https://moz.com/blog/technical-seo-checklist'),
    ),
)

NO_RECOMMENDATION = NoRecommendation()

STRATEGIES: Dict[Category, Any] = {
    Category.PERFORMANCE: PERFORMANCE_STRATEGY,
    Category.TECHNICAL: TECHNICAL_STRATEGY,
}


def strategy_for(category: Optional[str]):
    """Strategy registered for a category name, or the no-op strategy."""
    parsed = Category.parse(category)
    if parsed is None:
        return NO_RECOMMENDATION
    return STRATEGIES.get(parsed, NO_RECOMMENDATION)


def group_by_category(issues: Iterable[Issue]) -> Dict[str, Tuple[Issue, ...]]:
    """Group issues by category in order of first appearance.

    Issues without a category are filed under 'technical'.
    """
    def add(groups: Dict[str, Tuple[Issue, ...]], issue: Issue) -> Dict[str, Tuple[Issue, ...]]:
        category = str(issue.category) if issue.category else DEFAULT_ISSUE_CATEGORY
        return {**groups, category: groups.get(category, ()) + (issue,)}

    return reduce(add, issues, {})


def sort_by_severity(issues: Iterable[Issue]) -> List[Issue]:
    """Most severe first; ties keep their order. Unknown severities sort last."""
    def weight(issue: Issue) -> int:
        if not isinstance(issue.severity, str):
            return 0
        return SEVERITY_WEIGHTS.get(issue.severity, 0)

    return sorted(issues, key=lambda issue: -weight(issue))


def generate_recommendations(issues: Optional[Iterable[Any]]) -> List[Recommendation]:
    """Build one recommendation per category that has a strategy.

    Args:
        issues: Raw issue records or normalized Issues

    Returns:
        Recommendations in order of each category's first issue
    """
    grouped = group_by_category(normalize_issues(issues))

    recommendations = []
    for category, category_issues in grouped.items():
        recommendation = strategy_for(category).build(sort_by_severity(category_issues))
        if recommendation is None:
            logger.debug(f"No recommendation rules for category '{category}' ({len(category_issues)} issues)")
            continue
        recommendations.append(recommendation)

    return recommendations
