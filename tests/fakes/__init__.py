"""Shared test doubles: re-export in-memory host and state backends."""

from __future__ import annotations

from idack.host.session import InMemoryProcessSession
from idack.persistence.memory_backend import MemoryStateManager

__all__ = ["InMemoryProcessSession", "MemoryStateManager"]
