from __future__ import annotations

import tomllib

from configset.loaders.base import Source


class TomlSource(Source):
    format_name = "TOML"

    def _parse(self, text: str) -> list[object]:
        # TOML dates and times arrive as datetime objects; the timestamp decoder accepts them as-is.
        return [tomllib.loads(text)]
