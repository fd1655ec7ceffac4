"""Language utilities for psn-trophies.

This module centralizes the languages the trophy endpoint understands
(`npLanguage`). Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth without creating circular
imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported `npLanguage` values for trophy title names and details."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    PORTUGUESE = "pt"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.name.capitalize()
