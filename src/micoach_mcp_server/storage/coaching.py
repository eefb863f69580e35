"""Coaching data storage for persisting the active user, plan and progress."""

import logging
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from micoach_mcp_server.errors import RecordEncodeError
from micoach_mcp_server.models import Assessment, Plan, Progress, User
from micoach_mcp_server.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

USER_KEY = "currentUser"
PLAN_KEY = "currentPlan"
PROGRESS_KEY = "currentProgress"
ASSESSMENT_KEY = "currentAssessment"

ALL_KEYS = (USER_KEY, PLAN_KEY, PROGRESS_KEY, ASSESSMENT_KEY)


class CoachingStorage:
    """Typed access to the coaching records kept in a key-value store."""

    def __init__(self, store: Optional[KeyValueStorage] = None) -> None:
        """
        Initialize coaching storage.

        Args:
            store: Key-value store to use. Defaults to a store in the data directory.
        """
        self.store = store if store is not None else KeyValueStorage()

    def _load(self, key: str, model: type[ModelT]) -> ModelT | None:
        """Decode the record under a key, treating an unreadable blob as absent."""
        data = self.store.get(key)
        if data is None:
            return None
        try:
            return model.model_validate_json(data)
        except ValidationError as e:
            logger.warning("Ignoring undecodable record '%s': %s", key, e.error_count())
            return None

    def _save(self, key: str, record: BaseModel) -> None:
        """
        Encode a record and store it under a key.

        Raises:
            RecordEncodeError: If the record could not be serialized
            StorageWriteError: If the serialized record could not be written
        """
        try:
            data = record.model_dump_json(indent=2).encode("utf-8")
        except (PydanticSerializationError, ValueError) as e:
            raise RecordEncodeError(key, str(e)) from e
        self.store.set(key, data)

    def load_user(self) -> User | None:
        return self._load(USER_KEY, User)

    def save_user(self, user: User) -> None:
        self._save(USER_KEY, user)

    def load_assessment(self) -> Assessment | None:
        return self._load(ASSESSMENT_KEY, Assessment)

    def save_assessment(self, assessment: Assessment) -> None:
        self._save(ASSESSMENT_KEY, assessment)

    def load_plan(self) -> Plan | None:
        return self._load(PLAN_KEY, Plan)

    def save_plan(self, plan: Plan) -> None:
        self._save(PLAN_KEY, plan)

    def load_progress(self) -> Progress | None:
        return self._load(PROGRESS_KEY, Progress)

    def save_progress(self, progress: Progress) -> None:
        self._save(PROGRESS_KEY, progress)

    def clear(self) -> None:
        """Remove every stored coaching record."""
        for key in ALL_KEYS:
            self.store.remove(key)
