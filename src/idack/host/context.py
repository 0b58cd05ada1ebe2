"""Process context handed to a processor on each trigger."""

from __future__ import annotations

from idack.core.config import ProcessorConfig
from idack.core.protocols import IStateManager
from idack.models.state import Scope


class ProcessContext:
    """Gives a processor its state manager and configuration."""

    def __init__(self, *, state_manager: IStateManager, config: ProcessorConfig | None = None) -> None:
        self._state_manager = state_manager
        self._config = config if config is not None else ProcessorConfig()

    @property
    def state_manager(self) -> IStateManager:
        return self._state_manager

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def scope(self) -> Scope:
        return Scope(self._config.state_scope)
