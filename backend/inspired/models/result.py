"""
Handler outcomes.

Handlers return ``Ok`` with the body to serialize or ``Err`` with an HTTP
status and a JSON payload; the response formatter inspects the variant.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class Err:
    status_code: int
    payload: Dict[str, Any]

    @classmethod
    def message(cls, status_code: int, message: str) -> 'Err':
        return cls(status_code, {'message': message})


Result = Union[Ok, Err]
