from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


def camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def to_api(value: Any) -> Any:
    """Serialize domain records for JSON output, with camelCase field names."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            camel_case(f.name): to_api(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_api(item) for item in value]
    if isinstance(value, dict):
        return {key: to_api(item) for key, item in value.items()}
    return value
