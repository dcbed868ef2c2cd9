from pydantic import BaseModel, Field
from typing import Generic, List, Optional, TypeVar
from enum import Enum

T = TypeVar("T")


class QueryOutcome(str, Enum):
    """Why a query stopped"""
    OK = "ok"
    UNSUPPORTED = "unsupported"  # Kind has no lookup-by-id endpoint
    NOT_FOUND = "not_found"  # HTTP 404
    TRANSPORT_ERROR = "transport_error"  # Connection failure or non-success status
    DECODE_ERROR = "decode_error"  # Body is not the expected envelope


class QueryResult(BaseModel, Generic[T]):
    """Result of a single-resource lookup"""
    outcome: QueryOutcome
    data: Optional[T] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == QueryOutcome.OK


class PagedResult(BaseModel, Generic[T]):
    """
    Result of a collection fetch.

    data holds every item decoded before the loop stopped, in server order,
    even when outcome is not OK.
    """
    outcome: QueryOutcome = QueryOutcome.OK
    data: List[T] = Field(default_factory=list)
    pages: int = 0
    detail: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.outcome == QueryOutcome.OK
