"""
Configuration-time errors.

Query-time failures (transport, HTTP status, decode) never raise from the
query engine; they are reported through QueryOutcome instead.
"""

from typing import Optional


class PokemonTCGError(Exception):
    """Base class for errors raised by the client"""

    def __init__(self, **fields):
        self.fields = fields
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.fields:
            return type(self).__name__
        inner = ", ".join(f"{k}: {v!r}" for k, v in self.fields.items())
        return f"{type(self).__name__} {{ {inner} }}"


class ApiKeyNotFound(PokemonTCGError):
    """No API key was supplied or configured"""

    def __init__(self):
        super().__init__()


class MissingArgument(PokemonTCGError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(arg=arg)


class InvalidArgument(PokemonTCGError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(arg=arg)


class InvalidEndpoint(PokemonTCGError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(url=url)


class FailedOpeningFile(PokemonTCGError):
    def __init__(self, path: Optional[str] = None):
        self.path = path
        super().__init__(path=path)


class FailedParsingFile(PokemonTCGError):
    def __init__(self, path: Optional[str] = None):
        self.path = path
        super().__init__(path=path)
