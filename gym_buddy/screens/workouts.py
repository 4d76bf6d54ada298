"""
State for the workouts screen.

One ``WorkoutsScreen`` lives as long as the screen is shown. It owns the
loaded catalog and the selected workout, runs the catalog services and turns
their errors into a notification for the user.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence

from gym_buddy.errors import GymBuddyError
from gym_buddy.models.catalog import Catalog
from gym_buddy.models.workout import Workout
from gym_buddy.services.catalog import load_catalog
from gym_buddy.services.catalog_api import CatalogAPI
from gym_buddy.services.handoff_store import HandoffStore
from gym_buddy.services.mutations import MutationCoordinator
from gym_buddy.services.session_bootstrap import (
    persist,
    start_empty,
    start_from_workout,
)

logger = logging.getLogger(__name__)


class WorkoutsScreen:
    """Session-scoped state and actions of the workouts screen."""

    def __init__(self, api: CatalogAPI, store: HandoffStore, user_id: Optional[str]):
        self.api = api
        self.store = store
        self.user_id = user_id
        self.catalog: Optional[Catalog] = None
        self.coordinator: Optional[MutationCoordinator] = None
        self.selected: Optional[Workout] = None
        self.notification: Optional[str] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def default_workouts(self) -> List[Workout]:
        return list(self.catalog.default_workouts) if self.catalog else []

    @property
    def custom_workouts(self) -> List[Workout]:
        return list(self.catalog.custom_workouts) if self.catalog else []

    def _notify(self, error: GymBuddyError) -> None:
        logger.error(f"{type(error).__name__}: {error}")
        self.notification = error.user_message

    def dismiss_notification(self) -> None:
        self.notification = None

    def load(self) -> bool:
        """Load the catalog, discarding the result if a newer load started.

        Returns:
            True if a fresh catalog was applied
        """
        if not self.user_id:
            raise ValueError("No user is signed in")

        with self._lock:
            self._generation += 1
            generation = self._generation

        try:
            catalog = load_catalog(self.api, self.user_id)
        except GymBuddyError as e:
            with self._lock:
                if generation == self._generation:
                    self._notify(e)
            return False

        with self._lock:
            if generation != self._generation:
                logger.info(f"Discarding stale catalog load {generation}")
                return False
            self.catalog = catalog
            self.coordinator = MutationCoordinator(self.api, catalog)
            if self.selected is not None:
                self.selected = catalog.find(self.selected.id)
        return True

    def close(self) -> None:
        """Forget screen state; results of in-flight loads are discarded."""
        with self._lock:
            self._generation += 1
            self.catalog = None
            self.coordinator = None
            self.selected = None

    def select(self, workout_id) -> Optional[Workout]:
        self.selected = self.catalog.find(workout_id) if self.catalog else None
        return self.selected

    def clear_selection(self) -> None:
        self.selected = None

    @staticmethod
    def can_edit(workout: Workout) -> bool:
        """Templates are never offered rename or delete."""
        return workout.is_custom

    def start_workout(self, workout_id) -> bool:
        """Hand a catalog workout to the execution screen."""
        if self.catalog is None:
            logger.error("Cannot start a workout before the catalog is loaded")
            return False
        try:
            payload = start_from_workout(
                self.catalog, self.catalog.exercise_map, workout_id
            )
            persist(self.store, payload)
        except GymBuddyError as e:
            self._notify(e)
            return False
        return True

    def start_empty_workout(self) -> bool:
        try:
            persist(self.store, start_empty())
        except GymBuddyError as e:
            self._notify(e)
            return False
        return True

    def create_workout(
        self,
        name: str,
        description: str = "",
        exercises: Sequence[Dict[str, Any]] = (),
    ) -> Optional[Workout]:
        if self.coordinator is None:
            logger.error("Cannot create a workout before the catalog is loaded")
            return None
        try:
            return self.coordinator.create(self.user_id, name, description, exercises)
        except GymBuddyError as e:
            self._notify(e)
            return None

    def rename_selected(self, new_name: str, new_description: str) -> bool:
        if self.selected is None or self.coordinator is None:
            return False
        try:
            updated = self.coordinator.rename(
                self.selected.id, self.user_id, new_name, new_description
            )
        except GymBuddyError as e:
            self._notify(e)
            return False
        self.selected = updated
        return True

    def delete_selected(self, confirm: Callable[[Workout], bool]) -> bool:
        """Delete the selected workout after ``confirm`` approves it.

        Returns:
            True if the workout was deleted
        """
        if self.selected is None or self.coordinator is None:
            return False
        try:
            deleted = self.coordinator.delete(self.selected.id, self.user_id, confirm)
        except GymBuddyError as e:
            self._notify(e)
            return False
        if deleted:
            self.selected = None
        return deleted
