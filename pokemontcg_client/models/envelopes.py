"""
Wire envelopes wrapping every upstream payload.

    single: {"data": {...}}
    multi:  {"data": [{...}, ...]}
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class SingleEnvelope(BaseModel, Generic[T]):
    data: T


class MultiEnvelope(BaseModel, Generic[T]):
    data: List[T]
    # Paging counters, only sent by the cards and sets endpoints
    page: Optional[int] = None
    page_size: Optional[int] = Field(None, alias="pageSize")
    count: Optional[int] = None
    total_count: Optional[int] = Field(None, alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)
