"""Command-line interface for searching Jira issues.

Examples:
  # Issues assigned to the default user
  jira-search

  # Issues assigned to someone else
  jira-search --assignee jdoe

  # Issues carrying a label
  jira-search --label backend

  # Issues carrying every one of several labels
  jira-search --labels backend,urgent --match-all
"""

import argparse
import sys
from typing import Sequence

import structlog
from pydantic import ValidationError

from jira_search.client.jira_client import JiraClient
from jira_search.exceptions import InvalidFilterError, JiraSearchError
from jira_search.models.config import AppConfig
from jira_search.models.filters import ByAssignee, ByLabel, ByLabels, FilterIntent
from jira_search.query.jql_builder import build_query, describe_filter
from jira_search.query.result_formatter import ResultFormatter
from jira_search.utils.config_loader import ConfigLoader
from jira_search.utils.logging_config import configure_logging

log = structlog.stdlib.get_logger()


def parse_labels(value: str) -> list[str]:
    """Split a comma-separated label list, trimming whitespace and dropping empties."""
    return [label.strip() for label in value.split(",") if label.strip()]


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="jira-search",
        description="Search Jira issues by assignee or label",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n", 2)[2],
    )

    parser.add_argument(
        "--assignee",
        metavar="USERNAME",
        type=str,
        help="Find issues assigned to USERNAME (default: search.default_assignee from config)",
        default=None,
    )
    parser.add_argument(
        "--label",
        metavar="LABEL",
        type=str,
        help="Find issues carrying LABEL (takes precedence over --labels and --assignee)",
        default=None,
    )
    parser.add_argument(
        "--labels",
        metavar="LABEL1,LABEL2",
        type=parse_labels,
        help="Find issues carrying any of the comma-separated labels",
        default=None,
    )
    parser.add_argument(
        "--match-all",
        action="store_true",
        help="With --labels, require every label instead of any",
        default=False,
    )
    parser.add_argument(
        "--max-results",
        type=positive_int,
        help="Maximum number of issues to return (default: search.max_results from config)",
        default=None,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to configuration YAML file",
        default=None,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
        default=False,
    )

    return parser.parse_args(argv)


def select_filter(args: argparse.Namespace, default_assignee: str) -> FilterIntent:
    """Pick the filter intent from parsed arguments.

    Precedence is --label, then a non-empty --labels, then --assignee.

    Raises:
        InvalidFilterError: If an explicitly given assignee is blank
    """
    if args.label:
        return ByLabel(label=args.label)
    if args.labels:
        return ByLabels(labels=args.labels, match_all=args.match_all)

    username = args.assignee if args.assignee is not None else default_assignee
    try:
        return ByAssignee(username=username)
    except ValidationError as e:
        raise InvalidFilterError(f"Invalid assignee {username!r}: must not be empty") from e


def setup_logging(config: AppConfig, verbose: bool) -> None:
    log_level = "DEBUG" if verbose else config.logging.log_level
    configure_logging(
        log_level=log_level,
        json_logs=config.logging.json_logs,
        log_file=config.logging.log_file,
    )


def run(args: argparse.Namespace) -> str:
    """Load configuration, run the search and return the rendered listing.

    Raises:
        JiraSearchError: On configuration, transport or API failure
    """
    config = ConfigLoader().load_config(args.config)
    setup_logging(config, args.verbose)

    intent = select_filter(args, config.search.default_assignee)
    log.info("search_cli_started", filter=describe_filter(intent))

    client = JiraClient(config.jira, config.search)
    query = build_query(
        intent,
        max_results=args.max_results or config.search.max_results,
        fields=config.search.fields,
    )
    result = client.search(query)

    formatter = ResultFormatter(client.base_url)
    return formatter.format_results(result, title=describe_filter(intent))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the search CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_arguments(argv)

    # Logging before the config is read goes to stderr at WARNING
    configure_logging(log_level="DEBUG" if args.verbose else "WARNING")

    try:
        output = run(args)
    except JiraSearchError as e:
        log.debug("search_cli_failed", error_type=type(e).__name__, error=str(e))
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("Error: interrupted by user")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
