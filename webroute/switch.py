"""Conversion between route strings and values."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, ClassVar, Optional, TypeVar

from .route import Route

S = TypeVar("S", bound="Switch")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class Switch(ABC):
    """A value that can be produced from a route and turned back into one."""

    # Subclasses may set this to supply a value when a named capture is missing.
    _missing_key_factory: ClassVar[Optional[Callable[[], Any]]] = None

    @classmethod
    def switch(cls: type[S], route: Route) -> Optional[S]:
        """Produce a value from ``route``, or ``None`` when it does not fit."""
        return cls.from_route_part(route)[0]

    @classmethod
    @abstractmethod
    def from_route_part(cls: type[S], part: Route) -> tuple[Optional[S], Any]:
        """Produce a value from part of a route, with the state that remains."""

    @abstractmethod
    def build_route_section(self) -> tuple[str, Any]:
        """Return the route section for this value, and any state it carries."""

    @classmethod
    def key_not_available(cls: type[S]) -> Optional[S]:
        """Value used when a named capture is missing; ``None`` unless configured."""
        factory = cls._missing_key_factory
        if factory is None:
            return None
        return factory()


def build_route_from_switch(switch: Switch) -> Route:
    """Build a route from a switch value."""
    section, state = switch.build_route_section()
    return Route(route=section, state=state)


@lru_cache(maxsize=None)
def _leading_slash_for(inner_type: type) -> type:
    return type(
        f"LeadingSlash[{inner_type.__name__}]",
        (LeadingSlash,),
        {"_inner_type": inner_type},
    )


@dataclass(frozen=True)
class LeadingSlash(Switch):
    """Wraps a switch whose route must start with ``/``.

    Use ``LeadingSlash[Inner]`` to obtain the wrapper for a given inner type.
    """

    inner: Switch
    _inner_type: ClassVar[Optional[type]] = None

    def __class_getitem__(cls, inner_type: type) -> type:
        return _leading_slash_for(inner_type)

    @classmethod
    def from_route_part(cls, part: Route) -> tuple[Optional[LeadingSlash], Any]:
        if cls._inner_type is None:
            raise TypeError("LeadingSlash needs an inner type: LeadingSlash[Inner]")
        if not part.route.startswith("/"):
            return None, None
        inner, state = cls._inner_type.from_route_part(
            Route(route=part.route[1:], state=part.state)
        )
        return (cls(inner) if inner is not None else None), state

    def build_route_section(self) -> tuple[str, Any]:
        section, state = self.inner.build_route_section()
        return "/" + section, state


class _ScalarSwitch(Switch):
    """A switch holding one value parsed from, and written as, the whole route."""

    value: Any

    @classmethod
    @abstractmethod
    def _parse(cls, text: str) -> Any:
        """Parse ``text`` or raise ``ValueError``."""

    def _format(self) -> str:
        return str(self.value)

    @classmethod
    def from_route_part(cls, part: Route) -> tuple[Optional[Any], Any]:
        try:
            value = cls._parse(part.route)
        except ValueError:
            return None, part.state
        return cls(value), part.state

    def build_route_section(self) -> tuple[str, Any]:
        return self._format(), None


@dataclass(frozen=True)
class StrSwitch(_ScalarSwitch):
    """The route taken as a string, unchanged."""

    value: str

    @classmethod
    def _parse(cls, text: str) -> str:
        return text


@dataclass(frozen=True)
class BoolSwitch(_ScalarSwitch):
    """A route of exactly ``true`` or ``false``."""

    value: bool

    @classmethod
    def _parse(cls, text: str) -> bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueError(f"not a boolean: {text!r}")

    def _format(self) -> str:
        return "true" if self.value else "false"


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class IntSwitch(_ScalarSwitch):
    """A route holding a decimal integer with an optional sign."""

    value: int

    @classmethod
    def _parse(cls, text: str) -> int:
        return _parse_int(text)


@dataclass(frozen=True)
class NonZeroIntSwitch(_ScalarSwitch):
    """A route holding a decimal integer other than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ValueError("value must not be zero")

    @classmethod
    def _parse(cls, text: str) -> int:
        value = _parse_int(text)
        if value == 0:
            raise ValueError("value must not be zero")
        return value


@dataclass(frozen=True)
class FloatSwitch(_ScalarSwitch):
    """A route holding a floating-point number."""

    value: float

    @classmethod
    def _parse(cls, text: str) -> float:
        if not _FLOAT_PATTERN.fullmatch(text):
            raise ValueError(f"not a number: {text!r}")
        return float(text)

    def _format(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "inf" if self.value > 0 else "-inf"
        if self.value.is_integer():
            return str(int(self.value)) if self.value != 0 or math.copysign(
                1.0, self.value
            ) > 0 else "-0"
        return repr(self.value)