"""
String-valued catalog entries.

The types, supertypes, subtypes and rarities endpoints return plain strings,
e.g. {"data": ["Colorless", "Darkness", ...]}.
"""

from pydantic import RootModel


class _CatalogValue(RootModel[str]):

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash((type(self), self.root))


class Type(_CatalogValue):
    """Energy type, e.g. 'Colorless'"""


class Supertype(_CatalogValue):
    """'Energy', 'Pokémon' or 'Trainer'"""


class Subtype(_CatalogValue):
    """Card subtype, e.g. 'Item' or 'Supporter'"""


class Rarity(_CatalogValue):
    """Card rarity, e.g. 'Rare Holo'"""
