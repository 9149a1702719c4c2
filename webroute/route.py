"""A route string together with its associated history state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def format_route_string(path: str, query: str, fragment: str) -> str:
    """Join a path, query and fragment that already carry their separators."""
    return f"{path}{query}{fragment}"


@dataclass
class Route(Generic[T]):
    """A route string and the optional state stored with it."""

    route: str = ""
    state: Optional[T] = None

    def __str__(self) -> str:
        return self.route