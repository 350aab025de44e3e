from .config import Config
from .models import RepositoryInfo
from .size_fetcher import RepositorySizeFetcher, parse_repo_url
from .units import InvalidUnitError, convert_size

__all__ = ['Config', 'RepositoryInfo', 'RepositorySizeFetcher', 'parse_repo_url',
           'InvalidUnitError', 'convert_size']
