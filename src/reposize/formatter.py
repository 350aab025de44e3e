import json
from typing import Any, List

from .models import RepositoryInfo


def _display(value: Any) -> str:
    """Render a field the way the report shows it; missing values become 'null'."""
    if value is None:
        return "null"
    return str(value)


def format_size(info: RepositoryInfo) -> str:
    if info.unit in ("MB", "GB"):
        return f"{info.displayed_size:.2f}"
    return str(info.displayed_size)


def format_text(results: List[RepositoryInfo], verbose: bool = False) -> str:
    """Render results as plain text, one line per repository or one block in verbose mode."""
    if not verbose:
        return "\n".join(f"{r.url}: {format_size(r)} {r.unit}" for r in results)

    blocks = []
    for r in results:
        blocks.append("\n".join([
            f"Repository: {r.url}",
            f"Size: {format_size(r)} {r.unit}",
            f"Language: {_display(r.language)}",
            f"Stars: {_display(r.stars)}",
            f"Forks: {_display(r.forks)}",
            f"Last commit: {_display(r.last_commit)}",
        ]))
    return "\n\n".join(blocks)


def format_json(results: List[RepositoryInfo]) -> str:
    """Render results as a JSON array.

    size stays a number; every other field is emitted as a string,
    including the literal "null" for fields the API did not return.
    """
    return json.dumps([
        {
            "url": _display(r.url),
            "size": r.displayed_size,
            "unit": _display(r.unit),
            "language": _display(r.language),
            "stars": _display(r.stars),
            "forks": _display(r.forks),
            "last_commit": _display(r.last_commit),
        }
        for r in results
    ], indent=2)


def format_results(results: List[RepositoryInfo], json_output: bool = False,
                   verbose: bool = False) -> str:
    if json_output:
        return format_json(results)
    return format_text(results, verbose=verbose)
