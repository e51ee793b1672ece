"""Reference data managers satisfying ``petclinic.core.protocols.DataManager``."""

from petclinic.data.memory import InMemoryDataManager
from petclinic.data.sqlite import SqliteDataManager
from petclinic.data.states import DefaultEntityStates

__all__ = ["InMemoryDataManager", "SqliteDataManager", "DefaultEntityStates"]
