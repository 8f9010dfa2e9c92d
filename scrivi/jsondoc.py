"""A small JSON document wrapper with typed, defaulting accessors."""

from __future__ import annotations

import copy
import json
from typing import Any, Iterator

from scrivi.errors import ErrorCode, ScriviError

_MISSING = object()


class JsonDoc:
    """A JSON value, usually an object, with lenient typed access by key.

    A fresh document holds null; setting a key turns it into an object.
    Reads of missing keys or values of the wrong type return defaults.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any = None) -> None:
        self._data = data

    @property
    def data(self) -> Any:
        """The underlying JSON value."""
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonDoc):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonDoc({self._data!r})"

    def _object(self) -> dict:
        if self._data is None:
            self._data = {}
        if not isinstance(self._data, dict):
            raise TypeError(
                f"cannot use a string key on a JSON {type(self._data).__name__}"
            )
        return self._data

    def _get(self, key: str) -> Any:
        if isinstance(self._data, dict):
            return self._data.get(key, _MISSING)
        return _MISSING

    def contains(self, key: str) -> bool:
        return isinstance(self._data, dict) and key in self._data

    def get_string(self, key: str, default: str = "") -> str:
        value = self._get(key)
        return value if isinstance(value, str) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._get(key)
        return value if isinstance(value, bool) else default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def set_string(self, key: str, value: str) -> None:
        self._object()[key] = str(value)

    def set_bool(self, key: str, value: bool) -> None:
        self._object()[key] = bool(value)

    def set_int(self, key: str, value: int) -> None:
        self._object()[key] = int(value)

    def set_sub_doc(self, key: str, sub: JsonDoc) -> None:
        """Embed another document's value under key."""
        self._object()[key] = copy.deepcopy(sub._data)

    def get_sub_doc(self, key: str) -> JsonDoc:
        """Return the object under key, or an empty document if missing or not an object."""
        value = self._get(key)
        if isinstance(value, dict):
            return JsonDoc(copy.deepcopy(value))
        return JsonDoc()

    def append_to_array(self, key: str, item: JsonDoc) -> None:
        """Append item to the array under key, creating the array if absent."""
        obj = self._object()
        array = obj.get(key)
        if not isinstance(array, list):
            array = []
            obj[key] = array
        array.append(copy.deepcopy(item._data))

    def array_size(self, key: str) -> int:
        value = self._get(key)
        return len(value) if isinstance(value, list) else 0

    def array_item(self, key: str, index: int) -> JsonDoc:
        """Return element index of the array under key, or an empty document."""
        value = self._get(key)
        if isinstance(value, list) and 0 <= index < len(value):
            return JsonDoc(copy.deepcopy(value[index]))
        return JsonDoc()

    def array_items(self, key: str) -> Iterator[JsonDoc]:
        """Yield every element of the array under key."""
        value = self._get(key)
        if isinstance(value, list):
            for element in value:
                yield JsonDoc(copy.deepcopy(element))

    def dump(self, indent: int = 2) -> str:
        """Serialise with sorted keys; a negative indent gives compact output."""
        if indent < 0:
            return json.dumps(
                self._data, sort_keys=True, ensure_ascii=False, separators=(",", ":")
            )
        return json.dumps(self._data, indent=indent, sort_keys=True, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal: {name}")


def parse_json(text: str | bytes) -> JsonDoc:
    """Parse JSON text into a document, raising ScriviError on malformed input."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ScriviError(ErrorCode.PARSE_ERROR, str(exc)) from exc
    return JsonDoc(data)