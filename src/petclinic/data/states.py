"""Entity state inspection."""

from __future__ import annotations


class DefaultEntityStates:
    """An entity is new until storage has assigned it an ``id``."""

    def is_new(self, entity: object) -> bool:
        return getattr(entity, "id", None) is None


__all__ = ["DefaultEntityStates"]
