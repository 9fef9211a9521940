"""Command-line interface for the SEO scoring engine."""

import json
import sys

from seo_scoring.benchmark import BenchmarkAnalyzer
from seo_scoring.config import Config, ScoringProfile
from seo_scoring.exceptions import ScoringError
from seo_scoring.logging_config import setup_logging
from seo_scoring.report_generator import ReportGenerator
from seo_scoring.scorers import calculate_grade, get_score_rating


def load_json(path: str):
    """Read a JSON document from disk."""
    with open(path, 'r') as f:
        return json.load(f)


def load_profile(path):
    """Scoring profile from a JSON file, or the defaults when no path is given."""
    if not path:
        return ScoringProfile()
    return ScoringProfile.from_file(path)


def write_output(output: str, output_file=None):
    """Print output or write it to a file."""
    if output_file:
        with open(output_file, "w") as f:
            f.write(output)
        print(f"Results written to {output_file}")
    else:
        print(output)


def print_report(report):
    """Print a report in a formatted way.

    Args:
        report: Report object
    """
    print(f"\n{'=' * 60}")
    print(f"SEO Report for: {report.site_url}")
    print(f"Scan date: {report.scan_date}")
    print(f"{'=' * 60}")
    print(
        f"\n📊 Overall Score: {report.score:g}/100 "
        f"({calculate_grade(report.score)}, {get_score_rating(report.score)})"
    )

    if report.issues:
        print(f"\n⚠️  Issues ({len(report.issues)}):")
        for issue in report.issues:
            print(f"  • [{issue.severity}] {issue.title} ({issue.location})")

    if report.metrics:
        print(f"\n📈 Metrics:")
        for metric in report.metrics:
            print(f"  • {metric.name}: {metric.value}{metric.unit}")

    if report.recommendations:
        print(f"\n💡 Recommendations:")
        for rec in report.recommendations:
            print(f"  • {rec.title} (impact {rec.impact}/5)")
            for step in rec.steps:
                print(f"      - {step}")

    print(f"\n{'=' * 60}\n")


def print_benchmark(benchmark):
    """Print a competitive benchmark in a formatted way."""
    print(f"\n{'=' * 60}")
    print(f"Competitive Benchmark: {benchmark.client_url or 'client'}")
    print(f"{'=' * 60}")

    for name, result in benchmark.categories.items():
        total = len(result.competitors) + 1
        percentiles = result.distribution.percentiles
        print(f"\n{name.title()}:")
        print(f"  Client score: {result.client_score:.1f} (rank {result.client_rank} of {total})")
        print(f"  Competitor average: {result.competitor_average:.1f}")
        print(f"  Percentiles: p25={percentiles.p25:.1f} p50={percentiles.p50:.1f} p75={percentiles.p75:.1f}")
        for competitor in result.competitors:
            print(f"    • {competitor.name}: {competitor.score:.1f}")

    print(f"\n{'=' * 60}\n")


def report_command(args):
    """Generate a report from a scan results JSON file."""
    scan_results = load_json(args.scan_file)
    generator = ReportGenerator(load_profile(args.profile))
    report = generator.generate(
        scan_results,
        include_metrics=not args.no_metrics,
        include_recommendations=not args.no_recommendations,
    )

    if args.output == "json":
        write_output(json.dumps(report.to_dict(), indent=2, default=str), args.output_file)
    else:
        print_report(report)


def benchmark_command(args):
    """Benchmark a client scan against competitor scans."""
    client_data = load_json(args.client_file)
    competitors_data = load_json(args.competitors_file)

    analyzer = BenchmarkAnalyzer(load_profile(args.profile))
    benchmark = analyzer.analyze(client_data, competitors_data, categories=args.category)

    if args.output == "json":
        write_output(json.dumps(benchmark.to_dict(), indent=2, default=str), args.output_file)
    else:
        print_benchmark(benchmark)


def main(argv=None):
    """Main CLI entry point."""
    import argparse

    defaults = Config.from_env()

    parser = argparse.ArgumentParser(
        description="SEO Scoring - Score audit results, benchmark competitors and build reports"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=defaults.log_level.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=defaults.log_file,
        help="Write logs to file in addition to console",
    )
    parser.add_argument(
        "--profile",
        default=defaults.profile_path,
        help="JSON scoring profile overriding the default weights and thresholds",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Report command parser
    report_parser = subparsers.add_parser(
        "report", help="Generate a report from scan results."
    )
    report_parser.add_argument("scan_file", help="Scan results JSON file")
    report_parser.add_argument(
        "--no-metrics",
        action="store_true",
        help="Leave metrics out of the report",
    )
    report_parser.add_argument(
        "--no-recommendations",
        action="store_true",
        help="Leave recommendations out of the report",
    )
    report_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    report_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    report_parser.set_defaults(func=report_command)

    # Benchmark command parser
    benchmark_parser = subparsers.add_parser(
        "benchmark", help="Benchmark a client scan against competitor scans."
    )
    benchmark_parser.add_argument("client_file", help="Client scan JSON file")
    benchmark_parser.add_argument(
        "competitors_file", help="JSON object mapping competitor URLs to scan data"
    )
    benchmark_parser.add_argument(
        "--category",
        action="append",
        choices=["technical", "content", "keywords", "performance"],
        help="Category to benchmark (repeatable, default: all)",
    )
    benchmark_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    benchmark_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    benchmark_parser.set_defaults(func=benchmark_command)

    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (ScoringError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
