"""Shared fixtures for the scoring engine tests."""

import logging

import pytest


@pytest.fixture
def raw_issues():
    """Raw issues as produced by the site auditor."""
    return [
        {
            'title': 'Missing meta description',
            'description': '12 pages have no meta description.',
            'severity': 'critical',
            'location': '/blog/',
            'impact': 'Lower click-through rates',
            'category': 'technical',
        },
        {
            'title': 'Large image files',
            'severity': 'high',
            'url': 'https://example.com/products/',
            'category': 'performance',
            'type': 'large-images',
        },
        {
            'title': 'Broken internal links',
            'severity': 'critical',
            'category': 'technical',
        },
        {
            'title': 'Non-HTTPS Images',
            'severity': 'low',
            'category': 'security',
        },
        {
            'title': 'Duplicate title tags',
            'severity': 'low',
        },
        {
            'title': 'Slow TTFB on product pages',
            'severity': 'low',
            'category': 'performance',
        },
    ]


@pytest.fixture
def raw_metrics():
    """Raw metrics as produced by the site auditor."""
    return [
        {'name': 'Page Load Time', 'value': 2.4, 'unit': 's', 'change': -0.3,
         'description': 'Average full page load'},
        {'name': 'Indexed Pages', 'value': 0},
        {'value': None, 'unit': '%'},
    ]


@pytest.fixture
def scan_results(raw_issues, raw_metrics):
    """A complete scan result."""
    return {
        'siteUrl': 'https://example.com',
        'scanDate': '2024-05-01T10:00:00Z',
        'issues': raw_issues,
        'metrics': raw_metrics,
    }


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    package = logging.getLogger('seo_scoring')
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
