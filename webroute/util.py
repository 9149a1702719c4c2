"""Small parser combinators used by the route matcher.

A parser is a callable taking the remaining input and returning a pair
``(rest, value)``; it raises :class:`ParseError` when it does not match.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .tokens import Exact, MatcherToken

Parser = Callable[[str], tuple[str, str]]


class ParseError(Exception):
    """Raised when a parser does not match its input.

    ``remaining`` is the input at the point of failure, ``kind`` names the
    parser that failed, and ``fatal`` marks a failure that must not be
    recovered from by trying an alternative.
    """

    def __init__(self, remaining: str, kind: str, fatal: bool = False) -> None:
        super().__init__(f"{kind} failed at {remaining!r}")
        self.remaining = remaining
        self.kind = kind
        self.fatal = fatal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.remaining, self.kind, self.fatal) == (
            other.remaining,
            other.kind,
            other.fatal,
        )

    def __hash__(self) -> int:
        return hash((self.remaining, self.kind, self.fatal))


def tag(text: str) -> Parser:
    """Match ``text`` exactly at the start of the input."""

    def parse(i: str) -> tuple[str, str]:
        if i.startswith(text):
            return i[len(text):], i[: len(text)]
        raise ParseError(i, "Tag")

    return parse


def tag_possibly_case_sensitive(text: str, is_sensitive: bool) -> Parser:
    """Match ``text`` at the start of the input, ignoring case unless ``is_sensitive``."""
    if is_sensitive:
        return tag(text)

    folded = text.lower()

    def parse(i: str) -> tuple[str, str]:
        head = i[: len(text)]
        if len(head) == len(text) and head.lower() == folded:
            return i[len(text):], head
        raise ParseError(i, "Tag")

    return parse


def alternative(alternatives: Iterable[str]) -> Parser:
    """Match the first of ``alternatives`` that the input starts with."""
    choices = [tag(a) for a in alternatives]

    def parse(i: str) -> tuple[str, str]:
        for choice in choices:
            try:
                return choice(i)
            except ParseError as err:
                if err.fatal:
                    raise
        raise ParseError(i, "Tag")

    return parse


def consume_until(stop_parser: Parser) -> Parser:
    """Consume characters until ``stop_parser`` would match.

    The stop parser only peeks: its match is left in the returned rest.
    """

    def parse(i: str) -> tuple[str, str]:
        for pos in range(len(i) + 1):
            rest = i[pos:]
            try:
                stop_parser(rest)
            except ParseError as err:
                if err.fatal:
                    raise
                continue
            return rest, i[:pos]
        raise ParseError("", "Eof")

    return parse


def next_delimiters(tokens: Iterable[MatcherToken]) -> Parser:
    """Build a parser for the literal that ends a capture.

    ``tokens`` are the tokens following the capture; the first of them must
    be an :class:`Exact` token.
    """
    delimiters: list[str] = []
    for token in tokens:
        if isinstance(token, Exact):
            delimiters.append(token.literal)
            break
        raise ValueError(
            "a capture must be followed by an exact token, got " f"{token!r}"
        )
    return alternative(delimiters)