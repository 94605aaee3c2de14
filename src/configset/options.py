from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from configset.decode.tags import DEFAULT_TAG
from configset.path.segment import KeySegment, parse_path
from configset.store.value_store import NO_PREFIX

# Option sets for the public ConfigSet operations; keyword arguments are validated through these.


class ConfigSetOptions(BaseModel):
    # Construction options: which dataclass metadata key carries field annotations.
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)
    tag: str = Field(default=DEFAULT_TAG, min_length=1)


class LoadOptions(BaseModel):
    # Where loaded values are placed; an empty prefix merges into the root.
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)
    prefix: str = NO_PREFIX

    @field_validator("prefix")
    @classmethod
    def _single_key_prefix(cls, value: str) -> str:
        # The prefix must read back as exactly one key so get(prefix) finds the loaded value.
        if value and parse_path(value) != (KeySegment(value),):
            raise ValueError(f"prefix must be a single plain key, got {value!r}")
        return value


class DecodeOptions(BaseModel):
    # strict promotes conversion failures to errors; prefix narrows the decode to a subtree path.
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)
    strict: bool = False
    prefix: str = ""
