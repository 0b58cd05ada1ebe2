"""Type aliases used across IdAck."""

from __future__ import annotations

from collections.abc import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], str]
