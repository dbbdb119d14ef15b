"""
PRISM — Errors
Everything the picker reports to the user derives from PrismError.
"""

from __future__ import annotations


class PrismError(Exception):
    """Base class for picker errors."""


class NoCandidates(PrismError):
    """No theme of a catalog is loadable in the running app."""

    def __init__(self, catalog: str) -> None:
        self.catalog = catalog
        super().__init__(f"No {catalog} themes available")


class LoadError(PrismError):
    """A theme failed to activate."""

    def __init__(self, theme: str, cause: BaseException) -> None:
        self.theme = theme
        self.cause = cause
        super().__init__(f"Failed to load theme '{theme}': {cause}")


class SessionActive(PrismError):
    """A selection session is already browsing."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"A theme selection is already in progress ({prompt.strip()})")
