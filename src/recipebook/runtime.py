"""Runtime context management for recipebook.

Provides a lightweight container so the CLI and the console share one profile
and one recipe catalog without relying on a module-level recipe list. When
running under the CLI we build a default context, but tests can construct
their own and inject it explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .catalog import RecipeCatalog
from .logger import configure_logging
from .profile import Profile


@dataclass
class RuntimeContext:
    """Aggregates the services of one recipebook session."""

    profile: Profile = field(default_factory=Profile.current)
    catalog: RecipeCatalog = field(default_factory=RecipeCatalog)
    _logging_configured: bool = field(default=False, init=False, repr=False)

    def ensure_logging_configured(self) -> None:
        """Point the log sinks at this context's profile exactly once."""

        if not self._logging_configured:
            configure_logging(self.profile)
            self._logging_configured = True


_runtime_context: Optional[RuntimeContext] = None


def set_runtime_context(context: Optional[RuntimeContext]) -> None:
    """Replace the process-wide runtime context."""

    global _runtime_context
    _runtime_context = context


def get_runtime_context() -> RuntimeContext:
    """Return the active runtime context, creating a default if missing."""

    global _runtime_context
    if _runtime_context is None:
        _runtime_context = RuntimeContext()
    return _runtime_context


def bootstrap_runtime_context(profile_name: Optional[str] = None) -> RuntimeContext:
    """Ensure a runtime context exists and is fully initialized.

    A profile name different from the active context's starts a fresh context.
    """

    ctx = get_runtime_context()
    if profile_name and profile_name != ctx.profile.name:
        ctx = RuntimeContext(profile=Profile(profile_name))
        set_runtime_context(ctx)
    ctx.ensure_logging_configured()
    return ctx


__all__ = [
    "RuntimeContext",
    "bootstrap_runtime_context",
    "get_runtime_context",
    "set_runtime_context",
]
