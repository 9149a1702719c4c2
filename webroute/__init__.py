"""Route string matching against token lists, captures, and route-to-value switching."""

__version__ = "0.1.0"
__all__ = ["tokens", "util", "match_paths", "route_matcher", "route", "switch"]