from typing import Any, Optional, Protocol
import json


class ValueCodec(Protocol):
    """Encode logical values to the backend's string values and back.

    `load` must accept whatever `dump` produced; it also receives None for
    keys the backend does not hold.
    """

    def dump(self, value: Any) -> str: ...

    def load(self, raw: Optional[str]) -> Any: ...


def _json_dump(value: Any) -> str:
    # Compact separators keep stored values identical to JSON.stringify output.
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"invalid JSON constant {name!r}")


def _json_load(raw: str) -> Any:
    return json.loads(raw, parse_constant=_reject_constant)


def _json_or_raw(raw: str) -> Any:
    try:
        return _json_load(raw)
    except (ValueError, RecursionError):
        return raw


class JSONValueCodec:
    """Default codec: strings verbatim, everything else as JSON.

    Reading is best-effort: a value that parses as JSON is returned decoded,
    anything else is returned as the raw string. A stored string such as
    "42" or "null" therefore reads back as 42 or None; use
    `TaggedValueCodec` where that matters.
    """

    name = "json"

    def dump(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        return _json_dump(value)

    def load(self, raw: Optional[str]) -> Any:
        if raw is None:
            return None
        return _json_or_raw(raw)


class TaggedValueCodec:
    """Codec that stores an explicit type marker in front of the payload.

    Strings are written as ``s:<text>`` and structured values as
    ``j:<json>``. Values without a marker (written by `JSONValueCodec` or by
    another client) are decoded with the JSON-or-raw fallback.
    """

    name = "tagged"
    STRING_TAG = "s:"
    JSON_TAG = "j:"

    def dump(self, value: Any) -> str:
        if isinstance(value, str):
            return self.STRING_TAG + value
        return self.JSON_TAG + _json_dump(value)

    def load(self, raw: Optional[str]) -> Any:
        if raw is None:
            return None
        if raw.startswith(self.STRING_TAG):
            return raw[len(self.STRING_TAG):]
        if raw.startswith(self.JSON_TAG):
            try:
                return _json_load(raw[len(self.JSON_TAG):])
            except (ValueError, RecursionError):
                return raw
        return _json_or_raw(raw)


_CODECS = {
    JSONValueCodec.name: JSONValueCodec,
    TaggedValueCodec.name: TaggedValueCodec,
}


def get_codec(name: str) -> ValueCodec:
    """Return a new codec instance by name ("json" or "tagged")."""
    try:
        return _CODECS[name]()
    except KeyError:
        raise ValueError(f"Unknown value codec {name!r}; expected one of {sorted(_CODECS)}") from None
