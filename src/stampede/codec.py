"""Entry codecs used by network-backed stores."""

from __future__ import annotations

import json
from typing import Protocol, runtime_checkable

from stampede.types import CacheEntry


class EntryDecodeError(ValueError):
    """Raised when a stored payload cannot be turned back into an entry."""


@runtime_checkable
class EntryCodec(Protocol):
    """Turns cache entries into bytes and back."""

    def encode(self, entry: CacheEntry[object]) -> bytes:
        """Serialize a cache entry."""
        ...

    def decode(self, data: bytes | str) -> CacheEntry[object]:
        """Deserialize a cache entry."""
        ...


class JsonCodec:
    """JSON codec storing the value, compute duration and expiry fields.

    Values must be JSON-native: dicts with string keys, lists, strings,
    numbers, booleans and None. Tuples come back as lists, and values json
    cannot serialize fail on every write, so every read recomputes. Use a
    custom EntryCodec for other value types.
    """

    def encode(self, entry: CacheEntry[object]) -> bytes:
        """Serialize a cache entry to JSON."""
        return json.dumps(
            {
                "value": entry.value,
                "compute_duration_ms": entry.compute_duration_ms,
                "expires_at": entry.expires_at,
            }
        ).encode("utf-8")

    def decode(self, data: bytes | str) -> CacheEntry[object]:
        """Deserialize JSON to a cache entry."""
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            obj = json.loads(data)
            return CacheEntry(
                value=obj["value"],
                compute_duration_ms=_int_field(obj, "compute_duration_ms"),
                expires_at=_int_field(obj, "expires_at"),
            )
        except (
            UnicodeDecodeError,
            TypeError,
            KeyError,
            ValueError,
            OverflowError,
        ) as e:
            raise EntryDecodeError(f"Malformed cache entry: {e}") from e


def _int_field(obj: dict[str, object], name: str) -> int:
    """Return an integer metadata field, rejecting floats and booleans."""
    value = obj[name]
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} is not an integer: {value!r}")
    return value
