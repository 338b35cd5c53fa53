"""
FieldGuard Localization

Validators never format user-facing text themselves. They derive a
``{field}-{reason}`` key, collect named arguments and hand both to a
``Localizer``. ``MessageCatalog`` is the in-memory implementation used by
default and in tests; applications with their own translation layer can
inject anything that satisfies the protocol.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

from .exceptions import CatalogError

logger = logging.getLogger(__name__)


class Localizer(Protocol):
    """Capability the evaluators need to turn error keys into messages."""

    def resolve(self, key: str) -> str:
        ...

    def build(self, key: str, args: Mapping[str, str]) -> str:
        ...


class _Arguments(dict):
    """Leaves unknown placeholders in the template untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class MessageCatalog:
    """
    Key to template lookup for a single locale.

    Unknown keys resolve to the key itself, so an empty catalog yields the
    raw error keys (``email-invalid``, ``age-min``). Templates use named
    ``str.format`` fields such as ``{min}`` or ``{options}``.

    Attributes:
        locale: Locale code the messages are written in
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None, locale: str = "en"):
        self.locale = locale
        self._messages: Dict[str, str] = dict(messages or {})

    @classmethod
    def from_file(cls, path: Union[str, Path], locale: Optional[str] = None) -> "MessageCatalog":
        """
        Load a catalog from a flat JSON object of key to template.

        Args:
            path: JSON file to read
            locale: Locale code; defaults to the file stem

        Returns:
            The loaded catalog

        Raises:
            CatalogError: If the file is missing, unparsable or not a flat object
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot load message catalog {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Message catalog {path} must be a JSON object")

        bad_keys = [key for key, value in data.items() if not isinstance(value, str)]
        if bad_keys:
            raise CatalogError(
                f"Message catalog {path} has non-string templates for: {', '.join(sorted(bad_keys))}"
            )

        logger.debug("Loaded %d messages from %s", len(data), path)
        return cls(data, locale=locale or path.stem)

    @classmethod
    def from_directory(cls, directory: Union[str, Path], locale: str) -> "MessageCatalog":
        """Load ``<directory>/<locale>.json``."""
        return cls.from_file(Path(directory) / f"{locale}.json", locale=locale)

    def update(self, messages: Mapping[str, str]) -> "MessageCatalog":
        """Merge templates into the catalog, replacing existing keys."""
        self._messages.update(messages)
        return self

    def resolve(self, key: str) -> str:
        return self._messages.get(key, key)

    def build(self, key: str, args: Mapping[str, str]) -> str:
        template = self.resolve(key)
        try:
            return template.format_map(_Arguments(args))
        except (ValueError, IndexError, AttributeError) as e:
            logger.warning("Malformed message template for %s: %s", key, e)
            return template

    def __contains__(self, key: str) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"<MessageCatalog: {self.locale} ({len(self)} messages)>"
