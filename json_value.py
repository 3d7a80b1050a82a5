# json_value.py
# Tagged value tree produced by the parser
#
# Six closed variants: JsonNull, JsonBool, JsonNumber, JsonString, JsonArray,
# JsonObject. Every value is built once, bottom-up, and is read-only after that.

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional


class JsonValue:
    """Base of the value variants. Not instantiated directly."""

    __slots__ = ()

    def _key(self):
        raise NotImplementedError

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))


class JsonNull(JsonValue):
    __slots__ = ()

    def _key(self):
        return None

    def __repr__(self):
        return "JsonNull()"


class JsonBool(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        object.__setattr__(self, "value", bool(value))

    def _key(self):
        return self.value

    def __repr__(self):
        return f"JsonBool({self.value})"


class JsonNumber(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: float):
        object.__setattr__(self, "value", float(value))

    def _key(self):
        return self.value

    def __repr__(self):
        return f"JsonNumber({self.value!r})"


class JsonString(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: str):
        object.__setattr__(self, "value", str(value))

    def _key(self):
        return self.value

    def __repr__(self):
        return f"JsonString({self.value!r})"


class JsonArray(JsonValue):
    """Ordered sequence of values, stored as a tuple."""

    __slots__ = ("items",)
    __hash__ = None

    def __init__(self, items: Iterable[JsonValue] = ()):
        object.__setattr__(self, "items", tuple(items))

    def _key(self):
        return self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return f"JsonArray({list(self.items)!r})"


class JsonObject(JsonValue):
    """
    Mapping from key text to value.

    The members are copied on construction and exposed through a read-only
    proxy. Key order follows insertion, but equality ignores it.
    """

    __slots__ = ("members",)
    __hash__ = None

    def __init__(self, members: Optional[Mapping[str, JsonValue]] = None):
        object.__setattr__(self, "members", MappingProxyType(dict(members or {})))

    def _key(self):
        return dict(self.members)

    def __len__(self):
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key):
        return key in self.members

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def __repr__(self):
        return f"JsonObject({dict(self.members)!r})"


def to_python(value: JsonValue) -> Any:
    """
    Convert a value tree into plain Python data.

    JsonNull -> None, JsonBool -> bool, JsonNumber -> float, JsonString -> str,
    JsonArray -> list, JsonObject -> dict.
    """
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, (JsonBool, JsonNumber, JsonString)):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.members.items()}
    raise TypeError(f"not a JSON value: {value!r}")


__all__ = [
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "to_python",
]
