"""
FieldGuard Configuration Module

Provides configuration management for validators: which message catalog
to load and the tunable limits of the built-in rules.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .i18n import MessageCatalog


@dataclass(frozen=True)
class FieldGuardConfig:
    """
    Configuration shared by validators.

    Attributes:
        locale: Locale of the message catalog to load
        catalog_dir: Directory holding ``<locale>.json`` catalogs; when unset
            the catalog is empty and error keys are returned verbatim
        password_min_length: Shortest password accepted by the strict rule
        password_max_length: Longest password accepted by the strict rule
        reject_disposable_emails: Whether known throwaway domains are invalid
    """
    locale: str = "en"
    catalog_dir: Optional[str] = None
    password_min_length: int = 8
    password_max_length: int = 64
    reject_disposable_emails: bool = True

    @classmethod
    def from_env(cls) -> "FieldGuardConfig":
        """
        Create configuration from environment variables.

        Environment variables:
        - FIELDGUARD_LOCALE: Catalog locale
        - FIELDGUARD_CATALOG_DIR: Directory of JSON catalogs
        - FIELDGUARD_PASSWORD_MIN: Strict password minimum length
        - FIELDGUARD_PASSWORD_MAX: Strict password maximum length
        - FIELDGUARD_REJECT_DISPOSABLE_EMAILS: Reject throwaway email domains
        """
        return cls(
            locale=os.getenv("FIELDGUARD_LOCALE", "en"),
            catalog_dir=os.getenv("FIELDGUARD_CATALOG_DIR") or None,
            password_min_length=int(os.getenv("FIELDGUARD_PASSWORD_MIN", "8")),
            password_max_length=int(os.getenv("FIELDGUARD_PASSWORD_MAX", "64")),
            reject_disposable_emails=os.getenv("FIELDGUARD_REJECT_DISPOSABLE_EMAILS", "true").lower() == "true",
        )

    def load_catalog(self) -> MessageCatalog:
        """
        Build the message catalog this configuration points at.

        Each catalog file is read once per process; later calls for the
        same directory and locale share the loaded catalog.

        Returns:
            The catalog for ``locale``, or an empty one when no directory is set

        Raises:
            CatalogError: If the catalog file cannot be loaded the first time
        """
        if self.catalog_dir is None:
            return MessageCatalog(locale=self.locale)
        return _cached_catalog(self.catalog_dir, self.locale)


@lru_cache(maxsize=None)
def _cached_catalog(catalog_dir: str, locale: str) -> MessageCatalog:
    return MessageCatalog.from_directory(catalog_dir, locale)


# Default configuration instance
default_config = FieldGuardConfig()
