import pytest

from webroute.route_matcher import RouteMatcher
from webroute.tokens import (
    Capture,
    Exact,
    ManyNamed,
    MatcherSettings,
    Named,
    NumberedNamed,
)
from webroute.util import ParseError


def test_basic_separator():
    matcher = RouteMatcher([Exact("/")])
    assert matcher.capture_route_into_map("/") == ("", {})


def test_multiple_tokens():
    matcher = RouteMatcher([Exact("/lorem/")])
    assert matcher.capture_route_into_map("/lorem/") == ("", {})


def test_simple_capture():
    matcher = RouteMatcher([Exact("/"), Capture(Named("lorem")), Exact("/")])
    _, matches = matcher.capture_route_into_map("/ipsum/")
    assert matches["lorem"] == "ipsum"


def test_simple_capture_with_no_trailing_separator():
    matcher = RouteMatcher([Exact("/"), Capture(Named("lorem"))])
    _, matches = matcher.capture_route_into_map("/ipsum")
    assert matches["lorem"] == "ipsum"


def test_match_with_trailing_match_many():
    matcher = RouteMatcher([Exact("/a/"), Capture(ManyNamed("lorem"))])
    rest, matches = matcher.capture_route_into_map("/a/")
    assert rest == ""
    assert matches == {"lorem": ""}


def test_fail_match_with_trailing_match_single():
    matcher = RouteMatcher([Exact("/a/"), Capture(Named("lorem"))])
    with pytest.raises(ParseError):
        matcher.capture_route_into_map("/a/")


def test_match_n():
    matcher = RouteMatcher(
        [Exact("/"), Capture(NumberedNamed(3, "lorem")), Exact("/a")]
    )
    rest, matches = matcher.capture_route_into_map("/garbage1/garbage2/garbage3/a")
    assert rest == ""
    assert "lorem" in matches


def test_match_n_no_overrun():
    matcher = RouteMatcher([Exact("/"), Capture(NumberedNamed(3, "lorem"))])
    rest, _ = matcher.capture_route_into_map("/garbage1/garbage2/garbage3")
    assert len(rest) == 0


def test_match_n_named():
    matcher = RouteMatcher(
        [Exact("/"), Capture(NumberedNamed(3, "captured")), Exact("/a")]
    )
    _, matches = matcher.capture_route_into_map("/garbage1/garbage2/garbage3/a")
    assert matches["captured"] == "garbage1/garbage2/garbage3"


def test_match_many():
    matcher = RouteMatcher([Exact("/"), Capture(ManyNamed("lorem")), Exact("/a")])
    rest, matches = matcher.capture_route_into_map("/garbage1/garbage2/garbage3/a")
    assert rest == ""
    assert "lorem" in matches


def test_match_many_named():
    matcher = RouteMatcher(
        [Exact("/"), Capture(ManyNamed("captured")), Exact("/a")]
    )
    _, matches = matcher.capture_route_into_map("/garbage1/garbage2/garbage3/a")
    assert matches["captured"] == "garbage1/garbage2/garbage3"


def test_complete_rejects_leftover_input():
    matcher = RouteMatcher([Exact("/lorem")])
    with pytest.raises(ParseError) as info:
        matcher.capture_route_into_map("/lorem/ipsum")
    assert info.value.kind == "Eof"
    assert info.value.remaining == "/ipsum"


def test_incomplete_returns_leftover_input():
    matcher = RouteMatcher([Exact("/lorem")], MatcherSettings(complete=False))
    rest, matches = matcher.capture_route_into_map("/lorem/ipsum")
    assert rest == "/ipsum"
    assert matches == {}


def test_capture_into_vec_keeps_order():
    matcher = RouteMatcher(
        [
            Exact("/"),
            Capture(Named("b")),
            Exact("/"),
            Capture(Named("a")),
        ]
    )
    rest, captures = matcher.capture_route_into_vec("/lorem/ipsum")
    assert rest == ""
    assert captures == [("b", "lorem"), ("a", "ipsum")]


def test_capture_into_vec_complete_rejects_leftover():
    matcher = RouteMatcher([Exact("/lorem")])
    with pytest.raises(ParseError):
        matcher.capture_route_into_vec("/lorem/ipsum")


def test_case_insensitive_settings():
    matcher = RouteMatcher(
        [Exact("/lorem")], MatcherSettings(case_insensitive=True)
    )
    assert matcher.capture_route_into_map("/LoReM") == ("", {})


def test_capture_names():
    matcher = RouteMatcher(
        [
            Exact("/"),
            Capture(Named("lorem")),
            Exact("/"),
            Capture(ManyNamed("captured")),
            Exact("/"),
            Capture(NumberedNamed(2, "ipsum")),
        ]
    )
    assert matcher.capture_names() == {"lorem", "captured", "ipsum"}


def test_capture_names_without_captures():
    assert RouteMatcher([Exact("/lorem")]).capture_names() == set()