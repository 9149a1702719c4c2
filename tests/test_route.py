from webroute.route import Route, format_route_string


def test_format_route_string_joins_parts():
    assert format_route_string("/a/path", "?query=thing", "#test") == (
        "/a/path?query=thing#test"
    )


def test_format_route_string_with_empty_parts():
    assert format_route_string("/lorem", "", "") == "/lorem"
    assert format_route_string("", "", "") == ""


def test_route_from_string_has_no_state():
    route = Route("/lorem/ipsum")
    assert route.route == "/lorem/ipsum"
    assert route.state is None


def test_route_str_is_route_string():
    assert str(Route("/lorem?ipsum=dolor")) == "/lorem?ipsum=dolor"


def test_default_route_is_empty():
    route = Route()
    assert route.route == ""
    assert route.state is None
    assert str(route) == ""


def test_route_equality_considers_state():
    assert Route("/a", "state") == Route("/a", "state")
    assert Route("/a", "state") != Route("/a", None)
    assert Route("/a") != Route("/b")