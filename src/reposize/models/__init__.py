from .repository_info import RepositoryInfo

__all__ = ['RepositoryInfo']
