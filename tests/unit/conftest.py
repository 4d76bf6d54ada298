from unittest.mock import MagicMock

import pytest

from gym_buddy.services.catalog_api import CatalogAPI


@pytest.fixture
def raw_exercises():
    return [
        {
            "id": "ex-1",
            "name": "Bench Press",
            "description": "Flat barbell press",
            "muscle_group": "Chest",
        },
        {
            "id": "ex-2",
            "name": "Back Squat",
            "description": "High bar squat",
            "muscle_group": "Legs",
        },
    ]


@pytest.fixture
def raw_workouts():
    return [
        {
            "id": 1,
            "name": "Push",
            "description": "Chest, shoulders and triceps",
            "is_public": True,
            "exercises": [
                {
                    "exercise_id": "ex-1",
                    "performance_data": {
                        "sets": [
                            {"set": 1, "reps": 8, "weight": 155, "time": 90},
                            {"set": 2, "reps": 8, "weight": 155, "time": 90},
                        ]
                    },
                }
            ],
        },
        {
            "id": 2,
            "name": "My Legs",
            "description": "Custom leg day",
            "is_public": False,
            "exercises": [
                {
                    "exercise_id": "ex-2",
                    "performance_data": {
                        "sets": [{"set": 1, "reps": 10, "weight": 135, "time": 60}]
                    },
                }
            ],
        },
    ]


@pytest.fixture
def catalog_api(raw_exercises, raw_workouts):
    api = MagicMock(spec=CatalogAPI)
    api.list_exercises.return_value = raw_exercises
    api.list_workouts.return_value = raw_workouts
    return api


def make_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body if body is not None else {}
    response.text = str(body)
    return response


@pytest.fixture
def response_factory():
    return make_response
