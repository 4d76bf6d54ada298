from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class WorkoutSet(BaseModel):
    set_number: int = Field(alias="set")
    reps: Optional[int] = None
    weight: Optional[Union[int, float]] = None
    rest_time: Optional[int] = Field(default=None, alias="time")

    class Config:
        populate_by_name = True


class PerformanceData(BaseModel):
    sets: List[WorkoutSet] = Field(default_factory=list)


class WorkoutExerciseEntry(BaseModel):
    exercise_id: str
    performance_data: PerformanceData = Field(default_factory=PerformanceData)

    @field_validator("exercise_id", mode="before")
    @classmethod
    def normalize_exercise_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @property
    def sets(self) -> List[WorkoutSet]:
        return self.performance_data.sets


class Workout(BaseModel):
    id: str
    name: str
    description: Optional[str] = ""
    is_public: bool
    exercises: List[WorkoutExerciseEntry] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @property
    def is_custom(self) -> bool:
        """Only user-owned workouts may be renamed or deleted."""
        return not self.is_public
