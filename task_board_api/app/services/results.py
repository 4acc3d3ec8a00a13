"""
Outcome values returned by the task service.

Every public service operation returns a :class:`ServiceResult`
instead of raising.  The transport layer maps ``kind`` to a response
status; ``value`` carries the payload for ``OK`` and ``CREATED``;
``message`` explains a declined request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ResultKind(str, Enum):
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class ServiceResult:
    """Classification of a service call plus its payload."""

    kind: ResultKind
    value: Any = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind in (ResultKind.OK, ResultKind.CREATED, ResultKind.NO_CONTENT)

    @classmethod
    def success(cls, value: Any) -> "ServiceResult":
        return cls(ResultKind.OK, value=value)

    @classmethod
    def created(cls, value: Any) -> "ServiceResult":
        return cls(ResultKind.CREATED, value=value)

    @classmethod
    def no_content(cls) -> "ServiceResult":
        return cls(ResultKind.NO_CONTENT)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult":
        return cls(ResultKind.NOT_FOUND, message=message)

    @classmethod
    def store_failure(cls, message: str) -> "ServiceResult":
        return cls(ResultKind.STORE_FAILURE, message=message)
