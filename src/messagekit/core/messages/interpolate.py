import math
import re
from decimal import Decimal

from .types import Scalar, Variables

__all__ = ["interpolate"]

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)
EXPONENT_PATTERN = re.compile(r"e([+-])0*(\d)")

# floats in this range print positionally, outside it with an exponent
POSITIONAL_MIN = 1e-6
POSITIONAL_MAX = 1e21


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    positional = POSITIONAL_MIN <= abs(value) < POSITIONAL_MAX
    if positional and value.is_integer():
        return str(int(value))
    text = repr(value)
    if positional and "e" in text:
        return format(Decimal(text), "f")
    return EXPONENT_PATTERN.sub(r"e\1\2", text)


def _to_text(value: Scalar) -> str:
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case float():
            return _float_text(value)
        case _:
            return str(value)


def interpolate(template: str, vars: Variables | None = None) -> str:
    """Substitute {{name}} placeholders in a template.

    Example:
        interpolate("Hello {{name}}!", {"name": "World"}) returns "Hello World!"

    Substituted values are never scanned again, missing or None values become
    an empty string and anything that is not a placeholder is kept as is.
    Floats print the shortest way that reads back the same value, with an
    exponent only below 1e-6 or from 1e21 on ("1e-7", "1e+21").

    Args:
        template (str): Text with placeholders.
        vars (Variables | None): Values by placeholder name.

    Returns:
        str: The interpolated text, or the template itself if vars is None.
    """
    if vars is None:
        return template
    return PLACEHOLDER_PATTERN.sub(lambda m: _to_text(vars.get(m.group(1))), template)
