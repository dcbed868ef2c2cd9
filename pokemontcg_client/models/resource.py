"""
Resource routing.

Each resource kind served by the catalog API maps to exactly one URL path
segment and one payload model.
"""

from enum import Enum
from urllib.parse import quote
from typing import Type as TypingType, Union

from pydantic import BaseModel

from .card import Card
from .card_set import Set
from .catalog import Type, Supertype, Subtype, Rarity
from .errors import InvalidArgument


class ResourceKind(str, Enum):
    """Resource kinds and their path segments"""
    CARD = "cards"
    SET = "sets"
    TYPE = "types"
    SUPERTYPE = "supertypes"
    SUBTYPE = "subtypes"
    RARITY = "rarities"

    @property
    def path(self) -> str:
        return self.value

    @property
    def model(self) -> TypingType[BaseModel]:
        return _MODELS[self]

    @property
    def supports_find(self) -> bool:
        """Whether the upstream exposes GET /{segment}/{id} for this kind"""
        return self.value not in NO_LOOKUP_BY_ID

    def collection_path(self) -> str:
        return f"/{self.value}"

    def item_path(self, id: str) -> str:
        # One path segment, whatever characters the id holds
        return f"/{self.value}/{quote(id, safe='')}"

    @classmethod
    def of(cls, resource: Union["ResourceKind", TypingType[BaseModel], str]) -> "ResourceKind":
        """
        Resolve a resource kind.

        Args:
            resource: A ResourceKind, a payload model class (Card, Set, ...)
                or a path segment ("cards", "sets", ...)

        Returns:
            The matching ResourceKind

        Raises:
            InvalidArgument: if nothing matches
        """
        if isinstance(resource, cls):
            return resource
        if isinstance(resource, str):
            try:
                return cls(resource)
            except ValueError:
                raise InvalidArgument(arg=resource) from None
        for kind, model in _MODELS.items():
            if resource is model:
                return kind
        raise InvalidArgument(arg=getattr(resource, "__name__", repr(resource)))


NO_LOOKUP_BY_ID = frozenset({"types", "supertypes", "subtypes", "rarities"})

_MODELS = {
    ResourceKind.CARD: Card,
    ResourceKind.SET: Set,
    ResourceKind.TYPE: Type,
    ResourceKind.SUPERTYPE: Supertype,
    ResourceKind.SUBTYPE: Subtype,
    ResourceKind.RARITY: Rarity,
}
