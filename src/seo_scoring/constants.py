# src/seo_scoring/constants.py
"""Centralized constants for the SEO scoring engine.

This module contains the default weights, thresholds and field defaults used
across the scorers. For user-configurable scoring profiles, see config.py
and ScoringProfile.
"""

# =============================================================================
# Severity Constants
# =============================================================================

# Ordinal weight of each severity, used to rank issues within a category
SEVERITY_WEIGHTS = {
    'critical': 4,
    'high': 3,
    'medium': 2,
    'low': 1,
}

# Points deducted from a perfect score per issue of each severity
SEVERITY_DEDUCTIONS = {
    'critical': 10,
    'high': 5,
    'medium': 2,
    'low': 1,
}

# Score bounds
MIN_SCORE = 0
MAX_SCORE = 100


# =============================================================================
# Metric Scorer Constants
# =============================================================================

# Technical score weights (seoHealth section)
TECHNICAL_METRIC_WEIGHTS = {
    'missingTitlesPercent': 0.2,
    'missingDescriptionsPercent': 0.2,
    'hasSchemaMarkupPercent': 0.2,
    'hasCanonicalPercent': 0.2,
    'hasMobileViewportPercent': 0.2,
}

# Metric names starting with this prefix are inverted (100 - value)
MISSING_METRIC_PREFIX = 'missing'

# Content score weights (contentStats section)
CONTENT_METRIC_WEIGHTS = {
    'averageTitleLength': 0.25,
    'averageDescriptionLength': 0.25,
    'averageContentLength': 0.5,
}

# Optimal (min, max) ranges for content metrics, in characters
CONTENT_OPTIMAL_RANGES = {
    'averageTitleLength': (50, 60),
    'averageDescriptionLength': (140, 160),
    'averageContentLength': (800, 2000),
}

# Performance score weights (performance section)
PERFORMANCE_METRIC_WEIGHTS = {
    'domContentLoaded': 0.25,
    'load': 0.25,
    'firstPaint': 0.2,
    'firstContentfulPaint': 0.15,
    'largestContentfulPaint': 0.15,
}

# (good, medium, poor) thresholds in milliseconds, lower is better
PERFORMANCE_THRESHOLDS_MS = {
    'domContentLoaded': (1000, 2000, 3000),
    'load': (2000, 4000, 6000),
    'firstPaint': (800, 1500, 2500),
    'firstContentfulPaint': (1000, 2000, 3000),
    'largestContentfulPaint': (2500, 4000, 6000),
}

# Band scores for the piecewise performance curve
PERFORMANCE_GOOD_SCORE = 100
PERFORMANCE_MEDIUM_BAND_START = 75
PERFORMANCE_POOR_BAND_START = 50
PERFORMANCE_FAIL_BAND_START = 25
PERFORMANCE_BAND_WIDTH = 25


# =============================================================================
# Distribution Constants
# =============================================================================

# Half-open [min, max) score ranges used for benchmark distributions
DISTRIBUTION_RANGES = (
    (0, 20, '0-20'),
    (20, 40, '20-40'),
    (40, 60, '40-60'),
    (60, 80, '60-80'),
    (80, 100, '80-100'),
)



# =============================================================================
# Recommendation Constants
# =============================================================================

MIN_IMPACT = 1
MAX_IMPACT = 5

# Category assumed for issues that carry none
DEFAULT_ISSUE_CATEGORY = 'technical'


# =============================================================================
# Normalization Defaults
# =============================================================================

DEFAULT_ISSUE_TITLE = 'Unknown Issue'
DEFAULT_ISSUE_DESCRIPTION = ''
DEFAULT_ISSUE_SEVERITY = 'medium'
DEFAULT_ISSUE_LOCATION = 'Unknown Location'
DEFAULT_ISSUE_IMPACT = 'May affect SEO performance'

DEFAULT_METRIC_NAME = 'Unknown Metric'
DEFAULT_METRIC_VALUE = 0
DEFAULT_METRIC_UNIT = ''
DEFAULT_METRIC_DESCRIPTION = ''

DEFAULT_SITE_URL = 'Unknown Site'


# =============================================================================
# Grade Constants
# =============================================================================

# (minimum score, letter grade), checked top to bottom
GRADE_THRESHOLDS = (
    (97, 'A+'),
    (93, 'A'),
    (90, 'A-'),
    (87, 'B+'),
    (83, 'B'),
    (80, 'B-'),
    (77, 'C+'),
    (73, 'C'),
    (70, 'C-'),
    (67, 'D+'),
    (63, 'D'),
    (60, 'D-'),
)
FAILING_GRADE = 'F'

# (minimum score, rating), checked top to bottom
RATING_THRESHOLDS = (
    (90, 'Excellent'),
    (80, 'Good'),
    (70, 'Satisfactory'),
    (60, 'Needs Improvement'),
    (40, 'Poor'),
)
LOWEST_RATING = 'Critical'
