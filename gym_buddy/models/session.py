"""
Session payload handed off to the workout execution screen.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

EMPTY_MODE = "empty"
TEMPLATE_MODE = "from-template"


class SessionSet(BaseModel):
    set_number: int = Field(alias="set")
    reps: Optional[int] = None
    lbs: Optional[Union[int, float]] = None
    rest_time: Optional[int] = Field(default=None, alias="restTime")
    completed: bool = False

    class Config:
        populate_by_name = True


class SessionExercise(BaseModel):
    id: str
    name: str
    description: Optional[str] = ""
    muscle_group: Optional[str] = Field(default="", alias="muscleGroup")
    sets: List[SessionSet] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class SessionPayload(BaseModel):
    mode: Literal["empty", "from-template"]
    workout_id: Optional[str] = None
    exercises: List[SessionExercise] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.mode == EMPTY_MODE

    def exercises_for_handoff(self) -> List[Dict[str, Any]]:
        """Exercise list in the shape the execution screen reads."""
        return [exercise.model_dump(by_alias=True) for exercise in self.exercises]
