"""
Interface abstractions for the query engine.
"""

from .query import IQuery, Resource

__all__ = [
    "IQuery",
    "Resource",
]
