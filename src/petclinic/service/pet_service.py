"""
Pet persistence service.

Wraps the single persistence call made for a pet with structured log events
and contains every failure of that call.

Manifesto:
    - **Contain failures:** an exception from the data manager is logged with
      its full traceback and returned as ``Err``; it is never re-raised
    - **Correlate updates:** while an update runs, ``pet_id`` is bound into
      the log context so every event of the update carries it
    - **Release context on every exit:** ``pet_id`` is unbound by a scoped
      guard, also when something unexpected propagates

Events:
    ::

        save_pet     success  info   pet_saved          pet=<pet>
                     failure  error  pet_save_failed    pet=<pet>, exc_info
        update_pet   always   info   pet_update_started        (pet_id bound)
                     success  info   pet_updated               (pet_id bound)
                     failure  error  pet_update_failed  exc_info (pet_id bound)

Usage:
    service = PetService(SqliteDataManager("pets.db"))
    match service.save_pet(pet):
        case Ok(saved):
            ...
        case Err():
            ...  # see logs for the cause

Tags:
    service, persistence, logging, correlation, error-containment, petclinic
"""

from __future__ import annotations

from typing import Any

from petclinic.core.errors import PersistenceError
from petclinic.core.logging import LogContext, get_logger
from petclinic.core.protocols import DataManager
from petclinic.core.result import Err, Ok, Result
from petclinic.domain.pet import Pet

# Correlation key bound while an update is in flight; plays the role of the
# generic ``entityId`` correlation attribute, named after the pet it tracks
PET_ID_KEY = "pet_id"


class PetService:
    """Saves pets through a ``DataManager``.

    Args:
        data_manager: Persistence collaborator (``save(pet) -> pet``)
        logger: Optional structlog logger, defaults to the module logger
    """

    def __init__(self, data_manager: DataManager, logger: Any = None) -> None:
        self._data_manager = data_manager
        self._log = logger or get_logger(__name__)

    def save_pet(self, pet: Pet) -> Result[Pet]:
        """Persist a pet the caller considers new.

        Returns ``Ok`` with the pet returned by the data manager, or ``Err``
        wrapping a ``PersistenceError`` if the data manager raised.
        """
        try:
            saved = self._data_manager.save(pet)
        except Exception as e:
            self._log.error(
                "pet_save_failed",
                pet=str(pet),
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=e,
            )
            return Err(PersistenceError("Pet could not be saved", cause=e))

        self._log.info("pet_saved", pet=str(pet))
        return Ok(saved)

    def update_pet(self, pet: Pet) -> Result[Pet]:
        """Persist changes to an existing pet.

        ``pet_id`` (the identification number) is bound to the log context
        for the duration of the call and released before returning.
        """
        with LogContext(**{PET_ID_KEY: pet.identification_number}):
            self._log.info("pet_update_started")
            try:
                updated = self._data_manager.save(pet)
            except Exception as e:
                self._log.error(
                    "pet_update_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=e,
                )
                return Err(
                    PersistenceError("Pet could not be updated", cause=e).with_context(
                        **{PET_ID_KEY: pet.identification_number}
                    )
                )

            self._log.info("pet_updated")
            return Ok(updated)


__all__ = ["PetService", "PET_ID_KEY"]
