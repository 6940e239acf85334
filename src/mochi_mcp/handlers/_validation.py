"""
Argument checks shared by the tool handlers
"""

import math
from typing import Any, Dict

from ..errors import ValidationError


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid page number
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def require_string(tool: str, arguments: Dict[str, Any], field: str) -> str:
    value = arguments.get(field)
    if not isinstance(value, str) or not value:
        raise ValidationError(tool, field, f"{tool} requires a non-empty string '{field}'")
    return value
