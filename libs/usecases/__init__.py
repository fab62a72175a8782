from .search import SearchPodcasts

__all__ = ["SearchPodcasts"]
