"""Matching of route strings against a sequence of matcher tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .tokens import (
    Capture,
    End,
    Exact,
    ManyNamed,
    MatcherSettings,
    MatcherToken,
    Named,
    NumberedNamed,
)
from .util import (
    ParseError,
    Parser,
    consume_until,
    next_delimiters,
    tag,
    tag_possibly_case_sensitive,
)

logger = logging.getLogger(__name__)

_INVALID_CAPTURE_CHARACTERS = frozenset(" */#&?{}=")
_INVALID_MANY_CAPTURE_CHARACTERS = frozenset(" #&?=")

_Insert = Callable[[str, str], None]


def _take_not(invalid: frozenset[str]) -> Parser:
    """Take one or more characters that are not in ``invalid``."""

    def parse(i: str) -> tuple[str, str]:
        end = next((pos for pos, ch in enumerate(i) if ch in invalid), len(i))
        if end == 0:
            raise ParseError(i, "IsNot")
        return i[end:], i[:end]

    return parse


_valid_capture_characters = _take_not(_INVALID_CAPTURE_CHARACTERS)
_valid_many_capture_characters = _take_not(_INVALID_MANY_CAPTURE_CHARACTERS)
_separator = tag("/")


def _capture_named(
    i: str, following: Sequence[MatcherToken], name: str, insert: _Insert
) -> str:
    logger.debug("Matching Named (%s)", name)
    if following:
        rest, captured = consume_until(next_delimiters(following))(i)
    else:
        rest, captured = _valid_capture_characters(i)
    insert(name, captured)
    return rest


def _capture_many_named(
    i: str, following: Sequence[MatcherToken], name: str, insert: _Insert
) -> str:
    logger.debug("Matching ManyNamed (%s)", name)
    if following:
        rest, captured = consume_until(next_delimiters(following))(i)
    elif not i:
        # Matches even when nothing is left.
        rest, captured = i, ""
    else:
        rest, captured = _valid_many_capture_characters(i)
    insert(name, captured)
    return rest


def _capture_numbered_named(
    i: str,
    following: Sequence[MatcherToken],
    name: str,
    sections: int,
    insert: _Insert,
) -> str:
    logger.debug("Matching NumberedNamed (%d)", sections)
    pieces: list[str] = []
    for remaining in range(sections, 0, -1):
        if remaining > 1:
            i, piece = _valid_capture_characters(i)
            i, _ = _separator(i)
            pieces.append(piece + "/" if following else piece)
        elif following:
            i, piece = consume_until(next_delimiters(following))(i)
            pieces.append(piece)
        else:
            # The last section does not consume the character that follows it.
            i, piece = _valid_capture_characters(i)
            pieces.append(piece)
    insert(name, "".join(pieces))
    return i


def _match_path_impl(
    tokens: Sequence[MatcherToken],
    settings: MatcherSettings,
    i: str,
    insert: _Insert,
) -> str:
    logger.debug("Attempting to match path: %r using: %r", i, tokens)
    for index, token in enumerate(tokens):
        following = tokens[index + 1:]
        if isinstance(token, Exact):
            i, _ = tag_possibly_case_sensitive(
                token.literal, not settings.case_insensitive
            )(i)
        elif isinstance(token, Capture):
            variant = token.capture
            if isinstance(variant, Named):
                i = _capture_named(i, following, variant.name, insert)
            elif isinstance(variant, ManyNamed):
                i = _capture_many_named(i, following, variant.name, insert)
            elif isinstance(variant, NumberedNamed):
                i = _capture_numbered_named(
                    i, following, variant.name, variant.sections, insert
                )
            else:
                raise TypeError(f"unknown capture variant: {variant!r}")
        elif isinstance(token, End):
            if i:
                raise ParseError(i, "Eof", fatal=True)
        else:
            raise TypeError(f"unknown matcher token: {token!r}")
    logger.debug("Path matched")
    return i


def match_path(
    tokens: Sequence[MatcherToken], settings: MatcherSettings, i: str
) -> tuple[str, dict[str, str]]:
    """Match ``i`` against ``tokens``, collecting captures into a dict.

    Returns the unconsumed rest of the input and the captures; raises
    :class:`ParseError` when the input does not match.
    """
    captures: dict[str, str] = {}
    rest = _match_path_impl(tokens, settings, i, captures.__setitem__)
    return rest, captures


def match_path_list(
    tokens: Sequence[MatcherToken], settings: MatcherSettings, i: str
) -> tuple[str, list[tuple[str, str]]]:
    """Match ``i`` against ``tokens``, collecting captures into an ordered list."""
    captures: list[tuple[str, str]] = []
    rest = _match_path_impl(
        tokens, settings, i, lambda key, value: captures.append((key, value))
    )
    return rest, captures