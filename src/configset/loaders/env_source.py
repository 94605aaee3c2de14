from __future__ import annotations

import io
import os
from typing import Self

from dotenv import dotenv_values

from configset.loaders.base import Source


class EnvSource(Source):
    # KEY=value files; every value stays a string, a bare KEY maps to None.
    format_name = "env"

    def from_environment(self) -> Self:
        self._values.append(dict(os.environ))
        return self

    def _parse(self, text: str) -> list[object]:
        return [dict(dotenv_values(stream=io.StringIO(text), interpolate=False))]
