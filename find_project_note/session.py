"""Process-wide plugin state and per-session navigation state."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Optional

from mcp.server.fastmcp import Context

from find_project_note.config import load_settings, load_vault_configuration, save_settings
from find_project_note.core.vault_operations import VaultStore, ensure_vault_ready
from find_project_note.data_models import NotePath, Settings, VaultMetadata, ViewMode


@dataclass
class PluginState:
    """Vault and settings loaded once and shared by every session."""

    vault: VaultMetadata
    settings: Settings

    @property
    def store(self) -> VaultStore:
        return VaultStore(self.vault)

    def update_settings(self, **changes) -> Settings:
        """Apply ``changes`` and persist the full record."""
        self.settings = self.settings.updated(**changes)
        save_settings(self.vault, self.settings)
        return self.settings


@dataclass
class SessionView:
    """Editor view of one client session: the active note and how it is shown."""

    active_note: Optional[NotePath] = None
    mode: ViewMode = ViewMode.SOURCE
    reopen_count: int = 0
    generation: int = field(default=0, repr=False)

    def get_mode(self) -> ViewMode:
        return self.mode

    def set_mode(self, mode: ViewMode) -> None:
        self.mode = mode

    def reopen(self) -> None:
        self.reopen_count += 1

    def as_payload(self) -> dict:
        return {
            "note": self.active_note.as_posix() if self.active_note else None,
            "mode": self.mode.value,
            "reopen_count": self.reopen_count,
        }


_STATE: Optional[PluginState] = None
_SESSIONS: Dict[int, SessionView] = {}


def configure_state(vault: VaultMetadata, settings: Optional[Settings] = None) -> PluginState:
    """Install the process-wide state, loading stored settings unless given."""
    global _STATE
    ensure_vault_ready(vault)
    _STATE = PluginState(vault=vault, settings=settings if settings is not None else load_settings(vault))
    _SESSIONS.clear()
    return _STATE


def get_state() -> PluginState:
    """Return the process-wide state, loading it from ``vault.yaml`` on first use."""
    if _STATE is None:
        return configure_state(load_vault_configuration())
    return _STATE


def get_session_key(ctx: Optional[Context]) -> int:
    """Produce a stable per-session key; tool calls without a context share key 0."""
    if ctx is None:
        return 0
    return id(ctx.session)


def get_session_view(ctx: Optional[Context]) -> SessionView:
    return _SESSIONS.setdefault(get_session_key(ctx), SessionView())


async def wait_for_quiet(view: SessionView, debounce_ms: int) -> bool:
    """Debounce navigation events for one session.

    Returns:
        False when a newer event arrived for ``view`` while waiting.
    """
    view.generation += 1
    token = view.generation
    if debounce_ms > 0:
        await asyncio.sleep(debounce_ms / 1000)
    return token == view.generation
