"""
Errors raised by the workouts catalog services.
"""

from typing import Optional


class GymBuddyError(Exception):
    """Base class for errors surfaced to the workouts screen."""

    user_message = "Something went wrong. Please try again."


class CatalogLoadError(GymBuddyError):
    """Fetching or parsing the catalog failed."""

    user_message = "Could not load workouts. Please try again later."

    def __init__(self, resource: str, reason: str):
        self.resource = resource
        self.reason = reason
        super().__init__(f"Failed to load {resource}: {reason}")


class WorkoutNotFoundError(GymBuddyError):
    """A workout id is not present in the in-memory catalog."""

    user_message = "That workout is no longer available."

    def __init__(self, workout_id: str):
        self.workout_id = workout_id
        super().__init__(f"Workout {workout_id} not found in catalog")


class PersistError(GymBuddyError):
    """Writing the session payload to the handoff store failed."""

    user_message = "Could not start the workout. Please try again."


class MutationError(GymBuddyError):
    """A remote create, rename or delete was rejected."""

    def __init__(self, message: str, workout_id: Optional[str] = None):
        self.workout_id = workout_id
        super().__init__(message)


class CreateError(MutationError):
    user_message = "Failed to create workout."


class RenameError(MutationError):
    user_message = "Failed to update workout."


class DeleteError(MutationError):
    user_message = "Failed to delete workout."


class MutationInProgressError(MutationError):
    user_message = "Please wait for the previous change to finish."
