import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_API_URL, DEFAULT_UNIT, Config, resolve_token
from .formatter import format_results
from .github_client import GitHubClient
from .models import RepositoryInfo
from .rate_limit import report_rate_limit
from .size_fetcher import RepositorySizeFetcher
from .units import VALID_UNITS, InvalidUnitError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-size",
        description="Report the size of GitHub repositories without cloning them",
    )
    parser.add_argument("repositories", nargs="+", metavar="URL",
                        help="Repository URL, e.g. https://github.com/owner/repo")
    parser.add_argument("--token",
                        help="GitHub token (defaults to the GITHUB_TOKEN environment variable)")
    parser.add_argument("--unit", default=DEFAULT_UNIT,
                        help=f"Display unit: {', '.join(VALID_UNITS)} (default: {DEFAULT_UNIT})")
    parser.add_argument("--verbose", action="store_true",
                        help="Show language, stars, forks and last commit")
    parser.add_argument("--json", dest="json_output", action="store_true",
                        help="Print results as a JSON array")
    parser.add_argument("--api-url", default=DEFAULT_API_URL,
                        help=f"GitHub API base URL (default: {DEFAULT_API_URL})")
    parser.add_argument("--full-size", action="store_true",
                        help="Sum file sizes across all branches instead of using the reported size")
    parser.add_argument("--debug", action="store_true",
                        help="Print debug information to stderr")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    """Turn command line arguments into a Config."""
    args = build_parser().parse_args(argv)
    return Config(
        repositories=tuple(args.repositories),
        token=resolve_token(args.token),
        unit=args.unit,
        verbose=args.verbose,
        json_output=args.json_output,
        api_url=args.api_url.rstrip("/"),
        full_size=args.full_size,
        debug=args.debug,
    )


def collect_results(config: Config,
                    fetcher: Optional[RepositorySizeFetcher] = None) -> Tuple[List[RepositoryInfo], List[str]]:
    """Fetch every repository in order.

    Returns:
        tuple: (results, failed_urls). A repository whose size can't be
        converted to the requested unit is logged and left out of results.
    """
    fetcher = fetcher or RepositorySizeFetcher(config)
    results = []
    failed = []
    for url in config.repositories:
        try:
            results.append(fetcher.fetch(url))
        except InvalidUnitError as e:
            logger.error(f"Skipping {url}: {e}")
            failed.append(url)
    return results, failed


def run(config: Config) -> int:
    client = GitHubClient(config.api_url, config.token)
    results, failed = collect_results(config, RepositorySizeFetcher(config, client))

    if results:
        print(format_results(results, json_output=config.json_output, verbose=config.verbose))

    if config.token:
        print(report_rate_limit(client), file=sys.stderr)

    return 1 if failed else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on usage errors and 0 for --help
        return 0 if not e.code else 1

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
