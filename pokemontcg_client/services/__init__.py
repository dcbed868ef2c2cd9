from .client import Client
from .fixtures import load_envelope

__all__ = [
    "Client",
    "load_envelope",
]
