"""A matcher that captures values from route strings using matcher tokens."""

from __future__ import annotations

from dataclasses import dataclass, field

from .match_paths import match_path, match_path_list
from .tokens import Capture, MatcherSettings, MatcherToken
from .util import ParseError


def _ensure_consumed(rest: str) -> None:
    if rest:
        raise ParseError(rest, "Eof")


@dataclass
class RouteMatcher:
    """Matches route strings against ``tokens`` according to ``settings``."""

    tokens: list[MatcherToken]
    settings: MatcherSettings = field(default_factory=MatcherSettings)

    def capture_route_into_map(self, i: str) -> tuple[str, dict[str, str]]:
        """Match ``i``, collecting the captures into a dict.

        Returns the unconsumed rest and the captures. Raises
        :class:`ParseError` when the route does not match, or when input is
        left over and the settings require a complete match.
        """
        rest, captures = match_path(self.tokens, self.settings, i)
        if self.settings.complete:
            _ensure_consumed(rest)
        return rest, captures

    def capture_route_into_vec(self, i: str) -> tuple[str, list[tuple[str, str]]]:
        """Match ``i``, collecting the captures into an ordered list of pairs."""
        rest, captures = match_path_list(self.tokens, self.settings, i)
        if self.settings.complete:
            _ensure_consumed(rest)
        return rest, captures

    def capture_names(self) -> set[str]:
        """All the names that a successful match will capture."""
        return {token.name for token in self.tokens if isinstance(token, Capture)}