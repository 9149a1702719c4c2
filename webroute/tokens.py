"""Tokens that describe how a route string is matched, and matcher settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Named:
    """Captures one path section (no separators) under ``name``."""

    name: str


@dataclass(frozen=True)
class ManyNamed:
    """Captures any number of path sections, separators included, under ``name``."""

    name: str


@dataclass(frozen=True)
class NumberedNamed:
    """Captures exactly ``sections`` path sections under ``name``."""

    sections: int
    name: str


CaptureVariant = Named | ManyNamed | NumberedNamed


@dataclass(frozen=True)
class Exact:
    """Matches a literal piece of the route string."""

    literal: str


@dataclass(frozen=True)
class Capture:
    """Captures part of the route string according to its variant."""

    capture: CaptureVariant

    @property
    def name(self) -> str:
        """The key under which the captured text is stored."""
        return self.capture.name


@dataclass(frozen=True)
class End:
    """Requires that nothing of the route string is left."""


MatcherToken = Exact | Capture | End


@dataclass(frozen=True)
class MatcherSettings:
    """Settings that control how a matcher treats a route string."""

    complete: bool = True
    """The matcher must consume all of the input to succeed."""
    case_insensitive: bool = False
    """Literal matches ignore case."""