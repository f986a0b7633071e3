import dataclasses
import traceback
from enum import Enum
from typing import Any

from storage_costs import logger as log_module
from storage_costs.logger import logger
import storage_costs.constants as CONSTANTS


def get_debug_mode() -> bool:
    return log_module.DEBUG_MODE


def print_stack_trace():
    """
    Log the stack trace of the exception currently being handled,
    but only if debug mode is enabled.
    """
    if get_debug_mode():
        error_msg = traceback.format_exc()
        logger.error(error_msg)


def period_multiplier(period: str) -> int:
    """
    Display multiplier for a billing period.

    The engine always returns monthly figures; "annual" is a presentation
    concern and simply scales them by 12.

    Raises:
        ValueError: For an unknown period name.
    """
    try:
        return CONSTANTS.PERIOD_MULTIPLIERS[period.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown billing period '{period}'. "
            f"Expected one of: {', '.join(CONSTANTS.PERIOD_MULTIPLIERS)}"
        ) from None


def scale_for_period(data: Any, period: str = "monthly") -> Any:
    """
    Recursively multiply every monetary number in a result payload.

    Works on the camelCase dicts produced by the result objects' ``to_dict()``.
    Strings (labels, ids, enum values) and booleans are left untouched.
    """
    multiplier = period_multiplier(period)
    if multiplier == 1:
        return data
    return _scale(data, multiplier)


def _scale(data: Any, multiplier: int) -> Any:
    if isinstance(data, bool):
        return data
    if isinstance(data, (int, float)):
        return data * multiplier
    if isinstance(data, dict):
        return {key: _scale(value, multiplier) for key, value in data.items()}
    if isinstance(data, list):
        return [_scale(item, multiplier) for item in data]
    return data


# --------------------------------------------------------------------
# Serialization helpers
# --------------------------------------------------------------------
_UPPERCASE_WORDS = {"gb": "GB", "tb": "TB"}


def to_camel_case(name: str) -> str:
    """
    Convert a snake_case field name to the camelCase JSON key.

    Unit suffixes keep their usual spelling: ``data_retrieval_gb`` becomes
    ``dataRetrievalGB``.
    """
    head, *rest = name.split("_")
    return head + "".join(_UPPERCASE_WORDS.get(part, part.capitalize()) for part in rest)


def dataclass_to_dict(obj: Any, drop_none: bool = True) -> Any:
    """
    Serialize a dataclass tree to camelCase JSON-ready structures.

    Nested objects that define their own ``to_dict()`` are delegated to,
    enums collapse to their values and ``None`` fields are omitted.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result = {}
        for field in dataclasses.fields(obj):
            value = getattr(obj, field.name)
            if value is None and drop_none:
                continue
            result[to_camel_case(field.name)] = _serialize_value(value, drop_none)
        return result
    return _serialize_value(obj, drop_none)


def _serialize_value(value: Any, drop_none: bool) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value, drop_none)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(key): _serialize_value(item, drop_none) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item, drop_none) for item in value]
    return value
