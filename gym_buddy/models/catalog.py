"""
In-memory catalog of the workouts visible to one user.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from gym_buddy.models.exercise import ExerciseMap
from gym_buddy.models.workout import Workout


class Catalog(BaseModel):
    """Workouts split into built-in templates and user-owned workouts."""

    default_workouts: List[Workout] = Field(default_factory=list)
    custom_workouts: List[Workout] = Field(default_factory=list)
    exercise_map: ExerciseMap = Field(default_factory=dict)

    def all_workouts(self) -> List[Workout]:
        return self.default_workouts + self.custom_workouts

    def find(self, workout_id) -> Optional[Workout]:
        """Look up a workout in the default partition, then the custom one."""
        workout_id = str(workout_id)
        for workout in self.all_workouts():
            if workout.id == workout_id:
                return workout
        return None

    def find_custom(self, workout_id) -> Optional[Workout]:
        workout_id = str(workout_id)
        for workout in self.custom_workouts:
            if workout.id == workout_id:
                return workout
        return None

    def add_custom(self, workout: Workout) -> None:
        self.custom_workouts.append(workout)

    def replace_custom(self, workout: Workout) -> None:
        """Swap in an updated copy of a custom workout, keeping its position."""
        for index, existing in enumerate(self.custom_workouts):
            if existing.id == workout.id:
                self.custom_workouts[index] = workout
                return
        raise KeyError(workout.id)

    def remove_custom(self, workout_id) -> None:
        workout_id = str(workout_id)
        self.custom_workouts = [
            workout for workout in self.custom_workouts if workout.id != workout_id
        ]
