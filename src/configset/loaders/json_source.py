from __future__ import annotations

import json

from configset.loaders.base import Source


class JsonSource(Source):
    # One JSON document per input; numbers keep their int/float distinction.
    format_name = "JSON"

    def _parse(self, text: str) -> list[object]:
        return [json.loads(text)]
