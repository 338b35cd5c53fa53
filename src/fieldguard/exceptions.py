"""
FieldGuard Exceptions

Evaluations never raise for bad candidate data; these exceptions are
reserved for misconfiguration detected while wiring a validator.
"""


class FieldGuardError(Exception):
    """Base class for all FieldGuard errors."""


class CatalogError(FieldGuardError):
    """A message catalog could not be read or has the wrong shape."""


class UnknownConstraintError(FieldGuardError, KeyError):
    """Dispatch to a constraint name that is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No constraint registered under '{self.name}'"
