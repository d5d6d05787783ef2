"""
Care plan apply session service.

Drives the per-plant review cycle over a caller-provided store:

    Idle -> DraftBuilt -> Applied -> (optional) Undone

Only one undo snapshot is kept per plant. Building a new draft, applying
again or discarding the session drops it. Calls for the same plant id are
serialized with a per-plant lock; the store is read before and written after
each mutation, never in between.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Protocol

from careengine.domain.apply_draft import ApplyDraft, ApplyFlags, apply_draft, build_apply_draft
from careengine.domain.care_plan import CareAdvice, PlantCareState
from careengine.domain.exceptions import ConflictError, NotFoundError
from careengine.domain.undo_snapshot import UndoSnapshot, undo
from careengine.enums import ApplySessionState
from careengine.schemas.care import ApplySelectionRequest, CareAdviceRequest
from careengine.utils.time import utc_now

logger = logging.getLogger(__name__)


class CarePlanStore(Protocol):
    """Persistence collaborator for plant care state."""

    def get_state(self, plant_id: Any) -> Optional[PlantCareState]: ...

    def save_state(self, state: PlantCareState) -> None: ...


@dataclass
class _ApplySession:
    state: ApplySessionState = ApplySessionState.IDLE
    draft: Optional[ApplyDraft] = None
    snapshot: Optional[UndoSnapshot] = None


class CarePlanApplyService:
    """Build, apply and undo care plan drafts per plant."""

    def __init__(
        self,
        *,
        store: CarePlanStore,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._sessions: dict[Any, _ApplySession] = {}

        # Registry lock guards the dicts; plant locks serialize each plant's session
        self._registry_lock = threading.Lock()
        self._plant_locks: dict[Any, threading.Lock] = {}

    def _get_plant_lock(self, plant_id: Any) -> threading.Lock:
        """Return (or create) a per-plant lock."""
        with self._registry_lock:
            if plant_id not in self._plant_locks:
                self._plant_locks[plant_id] = threading.Lock()
            return self._plant_locks[plant_id]

    def _session(self, plant_id: Any) -> _ApplySession:
        with self._registry_lock:
            return self._sessions.setdefault(plant_id, _ApplySession())

    def _load(self, plant_id: Any) -> PlantCareState:
        state = self._store.get_state(plant_id)
        if state is None:
            logger.warning("No care state for plant %s", plant_id)
            raise NotFoundError(f"Plant {plant_id} not found", detail={"plant_id": plant_id})
        return state

    @staticmethod
    def _coerce_advice(advice: CareAdvice | CareAdviceRequest | Mapping[str, Any]) -> CareAdvice:
        if isinstance(advice, CareAdvice):
            return advice
        if isinstance(advice, CareAdviceRequest):
            return advice.to_domain()
        return CareAdviceRequest.model_validate(dict(advice)).to_domain()

    @staticmethod
    def _coerce_flags(
        flags: ApplyFlags | ApplySelectionRequest | Mapping[str, bool] | None,
    ) -> Optional[ApplyFlags]:
        if flags is None or isinstance(flags, ApplyFlags):
            return flags
        if isinstance(flags, ApplySelectionRequest):
            return flags.to_flags()
        return ApplySelectionRequest.model_validate(dict(flags)).to_flags()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def session_state(self, plant_id: Any) -> ApplySessionState:
        return self._session(plant_id).state

    def pending_draft(self, plant_id: Any) -> Optional[ApplyDraft]:
        return self._session(plant_id).draft

    def can_undo(self, plant_id: Any) -> bool:
        session = self._session(plant_id)
        return session.state is ApplySessionState.APPLIED and session.snapshot is not None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def build_draft(
        self,
        plant_id: Any,
        advice: CareAdvice | CareAdviceRequest | Mapping[str, Any],
    ) -> ApplyDraft:
        """
        Build a draft from advice text and make it the plant's pending draft.

        Raises:
            NotFoundError: If the store has no state for the plant
        """
        with self._get_plant_lock(plant_id):
            state = self._load(plant_id)
            draft = build_apply_draft(state, self._coerce_advice(advice))

            session = self._session(plant_id)
            session.draft = draft
            session.snapshot = None
            session.state = ApplySessionState.DRAFT_BUILT
            logger.info(
                "Built care plan draft for plant %s (%d change(s))",
                plant_id,
                len(draft.changes()),
            )
            return draft

    def apply(
        self,
        plant_id: Any,
        flags: ApplyFlags | ApplySelectionRequest | Mapping[str, bool] | None = None,
    ) -> PlantCareState:
        """
        Apply the pending draft and persist the result in one write.

        Args:
            plant_id: Plant identifier
            flags: Categories to apply, defaults to the draft's flags

        Returns:
            The saved PlantCareState

        Raises:
            ConflictError: If no draft is pending
            ValidationError: If no category is selected
            NotFoundError: If the store has no state for the plant
        """
        with self._get_plant_lock(plant_id):
            session = self._session(plant_id)
            if session.state is not ApplySessionState.DRAFT_BUILT or session.draft is None:
                logger.warning("Apply rejected for plant %s in state %s", plant_id, session.state)
                raise ConflictError(
                    "No care plan draft to apply",
                    detail={"plant_id": plant_id, "state": session.state.value},
                )

            state = self._load(plant_id)
            new_state, snapshot = apply_draft(
                state,
                session.draft,
                self._coerce_flags(flags),
                now=self._clock(),
            )
            self._store.save_state(new_state)

            session.snapshot = snapshot
            session.draft = None
            session.state = ApplySessionState.APPLIED
            logger.info("Applied care plan draft to plant %s", plant_id)
            return new_state

    def undo(self, plant_id: Any) -> PlantCareState:
        """
        Restore the plant to its state before the last apply.

        Raises:
            ConflictError: If there is no snapshot to restore
            NotFoundError: If the store has no state for the plant
        """
        with self._get_plant_lock(plant_id):
            session = self._session(plant_id)
            if session.state is not ApplySessionState.APPLIED or session.snapshot is None:
                logger.warning("Undo rejected for plant %s in state %s", plant_id, session.state)
                raise ConflictError(
                    "Nothing to undo",
                    detail={"plant_id": plant_id, "state": session.state.value},
                )

            state = self._load(plant_id)
            restored = undo(state, session.snapshot)
            self._store.save_state(restored)

            session.snapshot = None
            session.state = ApplySessionState.UNDONE
            logger.info("Undid care plan apply for plant %s", plant_id)
            return restored

    def discard(self, plant_id: Any) -> None:
        """Drop the pending draft and any undo snapshot (e.g. the user left the screen)."""
        lock = self._get_plant_lock(plant_id)
        with lock:
            with self._registry_lock:
                removed = self._sessions.pop(plant_id, None)
            if removed is not None:
                logger.info("Discarded care plan session for plant %s (%s)", plant_id, removed.state)

        # Forget the lock too unless another call picked it up meanwhile
        with self._registry_lock:
            if self._plant_locks.get(plant_id) is lock and not lock.locked():
                del self._plant_locks[plant_id]
