from .card import Card, Ability, Attack, WeaknessResistance, CardImages
from .card_set import Set, SetImages
from .catalog import Type, Supertype, Subtype, Rarity
from .envelopes import SingleEnvelope, MultiEnvelope
from .resource import ResourceKind
from .query import QueryOutcome, QueryResult, PagedResult
from .errors import (
    PokemonTCGError,
    ApiKeyNotFound,
    MissingArgument,
    InvalidArgument,
    InvalidEndpoint,
    FailedOpeningFile,
    FailedParsingFile,
)

__all__ = [
    "Card",
    "Ability",
    "Attack",
    "WeaknessResistance",
    "CardImages",
    "Set",
    "SetImages",
    "Type",
    "Supertype",
    "Subtype",
    "Rarity",
    "SingleEnvelope",
    "MultiEnvelope",
    "ResourceKind",
    "QueryOutcome",
    "QueryResult",
    "PagedResult",
    # Errors
    "PokemonTCGError",
    "ApiKeyNotFound",
    "MissingArgument",
    "InvalidArgument",
    "InvalidEndpoint",
    "FailedOpeningFile",
    "FailedParsingFile",
]
