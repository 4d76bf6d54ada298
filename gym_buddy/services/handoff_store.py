"""
Durable key-value storage used to hand a session payload to the workout
execution screen.

Each store keeps all keys in one unit (a JSON file or a CouchDB document) so
that a replace is observed either entirely or not at all.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from gym_buddy.config.config import HANDOFF_BACKEND, HANDOFF_PATH
from gym_buddy.config.database import Database
from gym_buddy.errors import PersistError

logger = logging.getLogger(__name__)

WORKOUT_TYPE_KEY = "workoutType"
EXERCISES_KEY = "exercises"
CURRENT_WORKOUT_ID_KEY = "currentWorkoutId"

HANDOFF_KEYS = (WORKOUT_TYPE_KEY, EXERCISES_KEY, CURRENT_WORKOUT_ID_KEY)


class HandoffStore(ABC):
    """Interface shared by the handoff store backends."""

    @abstractmethod
    def read_all(self) -> Dict[str, str]:
        pass

    @abstractmethod
    def replace(self, values: Dict[str, str]) -> None:
        """Atomically replace the stored keys with exactly ``values``."""

    def get(self, key: str) -> Optional[str]:
        return self.read_all().get(key)

    def read_exercises(self) -> List[Dict[str, Any]]:
        """Stored exercise list; a missing key reads as an empty list."""
        raw = self.get(EXERCISES_KEY)
        if not raw:
            return []
        return json.loads(raw)


class FileHandoffStore(HandoffStore):
    """Handoff store backed by a JSON file on the device."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or HANDOFF_PATH)

    def read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text())
        except ValueError as e:
            logger.warning(f"Unreadable handoff file {self.path}, treating as empty: {e}")
            return {}

    def replace(self, values: Dict[str, str]) -> None:
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", dir=directory, suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                json.dump(values, tmp)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Error writing handoff file {self.path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise PersistError(f"Could not write {self.path}: {e}") from e
        logger.debug(f"Handoff file {self.path} replaced with keys {list(values)}")


class CouchDBHandoffStore(HandoffStore):
    """Handoff store backed by a single CouchDB document."""

    def __init__(self, database: Database, doc_id: str = "session_handoff"):
        self.database = database
        self.doc_id = doc_id

    def read_all(self) -> Dict[str, str]:
        doc = self.database.get_document(self.doc_id)
        if not doc:
            return {}
        return {key: doc[key] for key in HANDOFF_KEYS if key in doc}

    def replace(self, values: Dict[str, str]) -> None:
        try:
            existing = self.database.get_document(self.doc_id)
            doc = {"_id": self.doc_id, "type": "session_handoff", **values}
            if existing and "_rev" in existing:
                doc["_rev"] = existing["_rev"]
            self.database.save_document(doc)
        except Exception as e:
            logger.error(f"Error saving handoff document {self.doc_id}: {e}")
            raise PersistError(f"Could not save {self.doc_id}: {e}") from e


def create_handoff_store(backend: Optional[str] = None) -> HandoffStore:
    """Build the handoff store selected by HANDOFF_BACKEND."""
    backend = backend or HANDOFF_BACKEND
    if backend == "file":
        return FileHandoffStore()
    if backend == "couchdb":
        return CouchDBHandoffStore(Database())
    raise ValueError(f"Unknown handoff backend: {backend}")
