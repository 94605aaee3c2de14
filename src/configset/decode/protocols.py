from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Decodable(Protocol):
    # Targets that take full manual responsibility for their raw config value.
    def decode(self, raw: object) -> None: ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    # Targets built from the text form of their source value; wins over primitive decoding.
    @classmethod
    def unmarshal_text(cls, raw: bytes) -> Self: ...


def is_user_class(candidate: object) -> bool:
    # Builtins such as bytes expose decode() but never opt into the protocols above.
    return isinstance(candidate, type) and candidate.__module__ != "builtins"
