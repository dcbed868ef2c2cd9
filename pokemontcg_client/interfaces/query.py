"""
Query interface - the contract shared by every catalog resource kind.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from ..models.resource import ResourceKind

T = TypeVar("T", bound=BaseModel)

Resource = Union[ResourceKind, Type[T], str]


class IQuery(ABC):
    """
    Generic query engine over the catalog resource kinds.

    The resource argument selects the kind: a ResourceKind, a payload model
    class (Card, Set, Type, ...) or a path segment ("cards", "sets", ...).
    """

    @abstractmethod
    async def find(self, resource: Resource, id: str) -> Optional[T]:
        """
        Find a single resource by id.

        Types, supertypes, subtypes and rarities cannot be looked up by id
        and always yield None.

        Args:
            resource: Resource kind to look up
            id: Identifier, escaped into a single URL path segment

        Returns:
            The decoded payload, or None when absent or on any failure
        """
        pass

    @abstractmethod
    async def _where(self, resource: Resource, args: Mapping[str, str]) -> List[T]:
        """
        Fetch every resource matching the filter arguments.

        Args:
            resource: Resource kind to fetch
            args: Query-string filters, e.g. {"q": "name:charizard"}

        Returns:
            Matching payloads in server order
        """
        pass

    @abstractmethod
    async def all(self, resource: Resource, args: Optional[Mapping[str, str]] = None) -> List[T]:
        """
        Fetch a whole collection.

        Args:
            resource: Resource kind to fetch
            args: Optional query-string filters; a "page" key restricts the
                call to that single page

        Returns:
            Decoded payloads in server order, possibly partial on failure
        """
        pass
