# webroute

Match route strings, such as `/users/42?tab=posts#top`, against lists of
matcher tokens and collect the captured sections. The package can also turn
routes into typed values and turn those values back into routes, using
`Switch` types.

The package has no dependencies outside the standard library.

## Installation

```
pip install webroute
```

To install the test dependencies as well:

```
pip install "webroute[test]"
```

## Matcher tokens

A matcher is a list of tokens. The tokens are defined in `webroute.tokens`:

- `Exact(literal)` matches the literal text at the current position.
- `Capture(Named(name))` captures a single section. If more tokens follow, it
  captures everything up to the literal of the next token. If it is the last
  token, it captures one or more characters that are none of
  `` */#&?{}=`` (space included).
- `Capture(ManyNamed(name))` captures across `/` separators. If more tokens
  follow, it captures everything up to the literal of the next token. If it is
  the last token, it captures the characters that are none of `` #&?=``, and it
  captures an empty string when no input is left.
- `Capture(NumberedNamed(sections, name))` captures exactly `sections`
  `/`-separated sections.
- `End()` requires that no input is left.

A capture that is followed by other tokens must be followed directly by an
`Exact` token. Otherwise matching raises `ValueError`. `Capture.name` gives the
name under which the capture is stored.

`MatcherSettings` has two fields. `complete` (default `True`) requires the
whole input to be consumed. `case_insensitive` (default `False`) makes `Exact`
tokens ignore case.

## Matching routes

```python
from webroute.route_matcher import RouteMatcher
from webroute.tokens import Capture, Exact, MatcherSettings, ManyNamed, Named

matcher = RouteMatcher(tokens=[Exact("/users/"), Capture(Named("id"))])
rest, captures = matcher.capture_route_into_map("/users/42")
assert rest == ""
assert captures == {"id": "42"}
assert matcher.capture_names() == {"id"}

many = RouteMatcher(tokens=[Exact("/"), Capture(ManyNamed("cap")), Exact("/thing")])
_, captures = many.capture_route_into_map("/anything/other/thing")
assert captures == {"cap": "anything/other"}

loose = RouteMatcher(
    tokens=[Exact("/hello")],
    settings=MatcherSettings(complete=False, case_insensitive=True),
)
rest, _ = loose.capture_route_into_map("/HeLLo/world")
assert rest == "/world"
```

`capture_route_into_map` returns the unconsumed rest and a dict of captures.
`capture_route_into_vec` returns the rest and a list of `(name, value)` pairs in
the order they were matched. Both raise `webroute.util.ParseError` when the
route does not match. They also raise it when input is left over and
`settings.complete` is set.

The lower-level functions `webroute.match_paths.match_path(tokens, settings, i)`
and `match_path_list(tokens, settings, i)` apply a token list to the input.
They do not check whether the input was fully consumed.

### Parser helpers

`webroute.util` contains the small parsers the matcher is built from. A parser
takes a string and returns `(rest, matched)`, or raises `ParseError`:

- `tag(text)`
- `tag_possibly_case_sensitive(text, is_sensitive)`
- `alternative(alternatives)`, which tries each string in order.
- `consume_until(stop_parser)`, which returns the text before the point where
  `stop_parser` would match and leaves that match in the rest.
- `next_delimiters(tokens)`

`ParseError` carries three attributes:

- `remaining`: the input at the point of failure.
- `kind`: the name of the parser that failed, for example `"Tag"`, `"Eof"` or
  `"IsNot"`.
- `fatal`: set when the failure came from an `End` token.

## Routes

`webroute.route.Route` holds a route string (`route`) and an optional `state`
value. `str(route)` returns the route string. `format_route_string(path, query,
fragment)` joins the three parts. Each part must already carry its own
separator (`?` or `#`).

```python
from webroute.route import Route, format_route_string

route = Route(format_route_string("/a/path", "?q=1", "#top"))
assert str(route) == "/a/path?q=1#top"
```

## Switching

A `Switch` type converts a route into a value, and a value back into a route:

- `Switch.switch(route)` returns the value, or `None` if the route does not fit.
- `from_route_part(part)` returns the value together with the route's state.
- `build_route_section()` returns the route text and any state.
- `build_route_from_switch(value)` wraps the result of `build_route_section()`
  in a `Route`.

The built-in switches take the whole route as their value:

- `StrSwitch` accepts any text.
- `BoolSwitch` accepts exactly `true` or `false`.
- `IntSwitch` accepts decimal integers with an optional sign.
- `NonZeroIntSwitch` accepts decimal integers other than zero.
- `FloatSwitch` accepts decimal and exponent notation, `inf`, `infinity` and
  `nan`.

`LeadingSlash[Inner]` requires the route to start with `/` and passes the rest
of the route to `Inner`.

```python
from webroute.route import Route
from webroute.switch import IntSwitch, LeadingSlash, build_route_from_switch

value = IntSwitch.switch(Route("-432"))
assert value == IntSwitch(-432)
assert str(build_route_from_switch(value)) == "-432"

wrapped = LeadingSlash[IntSwitch].switch(Route("/5"))
assert str(build_route_from_switch(wrapped)) == "/5"
assert LeadingSlash[IntSwitch].switch(Route("5")) is None
```

`key_not_available()` returns `None` unless a subclass sets
`_missing_key_factory`.

## What the package does not do

- It does not parse pattern strings such as `"/users/{id}"` into tokens. You
  build token lists yourself from the classes in `webroute.tokens`.
- It does not derive `Switch` types for your own enumerations.
- It has no browser history, navigation or rendering integration. A `Route` is
  only a value.

## Running the tests

```
pytest
```