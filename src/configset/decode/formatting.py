from __future__ import annotations

# Integral floats above this render in exponent form, like any other float.
_PLAIN_INTEGRAL_LIMIT = 1e21


def stringify(value: object) -> str:
    # Generic scalar formatter used for every string-fallback coercion.
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < _PLAIN_INTEGRAL_LIMIT:
        return str(int(value))
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
