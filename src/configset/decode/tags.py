from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

DEFAULT_TAG = "cfg"

_FLAG_STRICT = "strict"
_FLAG_REQUIRED = "required"
_FLAG_DEFAULT = "default="


@dataclass(frozen=True, slots=True)
class FieldPolicy:
    # Per-field decode policy; an empty path reuses the parent's value.
    path: str = ""
    required: bool = False
    strict: bool = False
    default: str | None = None

    def inherit_strict(self, strict: bool) -> FieldPolicy:
        if not strict or self.strict:
            return self
        return FieldPolicy(path=self.path, required=self.required, strict=True, default=self.default)


@lru_cache(maxsize=1024)
def parse_tag(annotation: str | None) -> FieldPolicy:
    # Grammar: <path>[,strict][,required][,default=<literal>]; unknown flags are ignored.
    if not annotation:
        return FieldPolicy()

    path, *flags = annotation.split(",")
    strict = False
    required = False
    default: str | None = None
    for flag in flags:
        if flag == _FLAG_STRICT:
            strict = True
        elif flag == _FLAG_REQUIRED:
            required = True
        elif flag.startswith(_FLAG_DEFAULT):
            default = flag[len(_FLAG_DEFAULT) :]
    return FieldPolicy(path=path, required=required, strict=strict, default=default)
