"""
PRISM — Active Theme State
Single owner of "which theme is on screen". Every theme change in the picker
goes through ActiveThemeState so there is exactly one writer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .errors import LoadError

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]


class ThemeBackend(Protocol):
    """What the host renderer has to provide."""

    def is_installed(self, theme: str) -> bool: ...

    def activate(self, theme: str) -> None: ...

    def deactivate(self, theme: str) -> None: ...


def log_notifier(message: str, severity: str = "information") -> None:
    level = {"error": logging.ERROR, "warning": logging.WARNING}.get(severity, logging.INFO)
    logger.log(level, message)


@dataclass(frozen=True)
class ApplyResult:
    theme: str
    error: Optional[LoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ActiveThemeState:
    """Tracks the active theme list and applies themes through a backend."""

    def __init__(self, backend: ThemeBackend, notify: Optional[Notifier] = None) -> None:
        self.backend = backend
        self.notify: Notifier = notify or log_notifier
        self._active: list[str] = []

    @property
    def current(self) -> Optional[str]:
        return self._active[0] if self._active else None

    def list_active(self) -> list[str]:
        return list(self._active)

    def is_loadable(self, theme: str) -> bool:
        return self.backend.is_installed(theme)

    def deactivate_all(self) -> None:
        while self._active:
            theme = self._active.pop()
            self.backend.deactivate(theme)
            logger.debug("Deactivated theme %s", theme)

    def adopt(self, theme: Optional[str]) -> None:
        """Record a theme the host switched to without going through apply()."""
        logger.info("Theme changed outside the picker: %s", theme or "no theme")
        self._active = [theme] if theme is not None else []

    def apply(self, theme: str) -> ApplyResult:
        """Replace the active theme with `theme`.

        Load failures are reported through the notifier and returned, never
        raised. After a failure no theme is active.
        """
        self.deactivate_all()
        try:
            self.backend.activate(theme)
        except Exception as exc:
            error = LoadError(theme, exc)
            logger.warning("%s", error)
            self.notify(str(error), "error")
            return ApplyResult(theme, error)
        self._active = [theme]
        logger.debug("Activated theme %s", theme)
        return ApplyResult(theme)
