"""Async typed client for the Pokemon TCG catalog API (api.pokemontcg.io/v2)."""

from .config import Settings, settings, POKEMON_TCG_URL
from .interfaces import IQuery
from .models import (
    Card,
    Set,
    Type,
    Supertype,
    Subtype,
    Rarity,
    ResourceKind,
    QueryOutcome,
    QueryResult,
    PagedResult,
    PokemonTCGError,
    ApiKeyNotFound,
    MissingArgument,
    InvalidArgument,
    InvalidEndpoint,
    FailedOpeningFile,
    FailedParsingFile,
)
from .services import Client, load_envelope

__all__ = [
    # Client
    "Client",
    "IQuery",
    "Settings",
    "settings",
    "POKEMON_TCG_URL",
    "load_envelope",
    # Models
    "Card",
    "Set",
    "Type",
    "Supertype",
    "Subtype",
    "Rarity",
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
