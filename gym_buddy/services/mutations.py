"""
Service for creating, renaming and deleting custom workouts.

Remote calls happen first; the in-memory catalog is only changed after the
remote store has accepted the mutation.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Sequence

import requests
from pydantic import ValidationError

from gym_buddy.errors import (
    CreateError,
    DeleteError,
    MutationInProgressError,
    RenameError,
)
from gym_buddy.models.catalog import Catalog
from gym_buddy.models.workout import Workout
from gym_buddy.services.catalog_api import CatalogAPI

logger = logging.getLogger(__name__)


def _error_detail(response: requests.Response) -> str:
    """Best-effort error text from a rejected response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"


class MutationCoordinator:
    """Runs workout mutations and reconciles the catalog afterwards."""

    def __init__(self, api: CatalogAPI, catalog: Catalog):
        self.api = api
        self.catalog = catalog
        self._pending = set()

    @contextmanager
    def _exclusive(self, workout_id: str):
        if workout_id in self._pending:
            raise MutationInProgressError(
                f"A change to workout {workout_id} is already in progress",
                workout_id=workout_id,
            )
        self._pending.add(workout_id)
        try:
            yield
        finally:
            self._pending.discard(workout_id)

    def create(
        self,
        user_id: str,
        name: str,
        description: str = "",
        exercises: Sequence[Dict[str, Any]] = (),
    ) -> Workout:
        """Create a custom workout and add it to the catalog.

        Raises:
            CreateError: If the user id or name is missing, or the server rejects it
        """
        if not user_id or not name:
            raise CreateError("A user id and workout name are required")

        try:
            response = self.api.create_workout(user_id, name, description, exercises)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error creating workout: {e}")
            raise CreateError(f"Error creating workout: {e}") from e

        if not response.ok:
            detail = _error_detail(response)
            logger.error(f"Error creating workout: {response.status_code} {detail}")
            raise CreateError(detail)

        # The server already holds the workout; fill gaps in its reply from the
        # request and always file it as a custom workout.
        try:
            body = response.json()
            if not isinstance(body, dict):
                raise ValueError(f"expected an object, got {type(body).__name__}")
            if body.get("id") in (None, ""):
                raise ValueError("missing workout id")
            workout = Workout.model_validate(
                {
                    "name": name,
                    "description": description,
                    "exercises": list(exercises),
                    **body,
                    "is_public": False,
                }
            )
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected response format: {response.text}")
            raise CreateError(f"Unexpected response format: {e}") from e

        self.catalog.add_custom(workout)
        logger.info(f"Created workout with ID: {workout.id}")
        return workout

    def rename(
        self, workout_id: str, user_id: str, new_name: str, new_description: str
    ) -> Workout:
        """Rename a custom workout.

        Args:
            workout_id: ID of the workout to rename
            user_id: Owner of the workout
            new_name: New name
            new_description: New description

        Returns:
            The updated workout, as now held in the catalog

        Raises:
            RenameError: If ids are missing, the workout is not a custom one,
                or the server rejects the update
            MutationInProgressError: If the workout is already being changed
        """
        if not workout_id or not user_id:
            raise RenameError("Workout ID or User ID is missing", workout_id=workout_id)

        workout_id = str(workout_id)
        workout = self.catalog.find_custom(workout_id)
        if workout is None:
            raise RenameError(
                f"Workout {workout_id} is not a custom workout", workout_id=workout_id
            )

        with self._exclusive(workout_id):
            try:
                response = self.api.update_workout_profile(
                    workout_id, user_id, new_name, new_description
                )
            except requests.exceptions.RequestException as e:
                logger.error(f"Error updating workout {workout_id}: {e}")
                raise RenameError(str(e), workout_id=workout_id) from e

            if not response.ok:
                detail = _error_detail(response)
                logger.error(f"Error updating workout {workout_id}: {detail}")
                raise RenameError(detail, workout_id=workout_id)

            updated = workout.model_copy(
                update={"name": new_name, "description": new_description}
            )
            self.catalog.replace_custom(updated)

        logger.info(f"Workout {workout_id} renamed to {new_name}")
        return updated

    def delete(
        self,
        workout_id: str,
        user_id: str,
        confirm: Callable[[Workout], bool],
    ) -> bool:
        """Delete a custom workout once the user has confirmed.

        Args:
            workout_id: ID of the workout to delete
            user_id: Owner of the workout
            confirm: Prompt shown before the remote call; returns False to cancel

        Returns:
            True if the workout was deleted, False if the user cancelled

        Raises:
            DeleteError: If ids are missing, the workout is not a custom one,
                or the server rejects the delete
            MutationInProgressError: If the workout is already being changed
        """
        if not workout_id or not user_id:
            raise DeleteError("Workout ID or User ID is missing", workout_id=workout_id)

        workout_id = str(workout_id)
        workout = self.catalog.find_custom(workout_id)
        if workout is None:
            raise DeleteError(
                f"Workout {workout_id} is not a custom workout", workout_id=workout_id
            )

        with self._exclusive(workout_id):
            if not confirm(workout):
                logger.info(f"Delete of workout {workout_id} cancelled")
                return False

            try:
                response = self.api.delete_workout(workout_id, user_id)
            except requests.exceptions.RequestException as e:
                logger.error(f"Error deleting workout {workout_id}: {e}")
                raise DeleteError(str(e), workout_id=workout_id) from e

            if not response.ok:
                detail = _error_detail(response)
                logger.error(f"Error deleting workout {workout_id}: {detail}")
                raise DeleteError(detail, workout_id=workout_id)

            self.catalog.remove_custom(workout_id)

        logger.info(f"Workout {workout_id} deleted")
        return True
