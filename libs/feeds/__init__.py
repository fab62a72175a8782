from .rss import render_rss

__all__ = ["render_rss"]
