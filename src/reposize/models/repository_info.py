from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class RepositoryInfo:
    """Size and metadata for a single repository."""
    url: str
    size_raw: int  # kilobytes, as reported by the API or summed across branches
    displayed_size: Union[int, float]
    unit: str
    language: Optional[str] = None
    stars: Optional[int] = None
    forks: Optional[int] = None
    last_commit: Optional[str] = None
