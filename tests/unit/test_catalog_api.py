from unittest.mock import MagicMock, patch

import pytest
import requests

from gym_buddy.services.catalog_api import CatalogAPI


@pytest.fixture
def catalog_api_instance():
    return CatalogAPI(base_url="http://catalog.test/", timeout=5)


@patch("gym_buddy.services.catalog_api.requests.get")
def test_list_exercises_returns_payload(mock_get, catalog_api_instance, raw_exercises):
    mock_get.return_value = MagicMock(status_code=200, json=lambda: raw_exercises)

    results = catalog_api_instance.list_exercises()

    assert results == raw_exercises
    assert mock_get.call_args.args[0] == "http://catalog.test/exercises"
    assert mock_get.call_args.kwargs["timeout"] == 5


@patch("gym_buddy.services.catalog_api.requests.get")
def test_list_workouts_is_scoped_to_user(mock_get, catalog_api_instance):
    mock_get.return_value = MagicMock(status_code=200, json=lambda: [])

    catalog_api_instance.list_workouts("u1")

    assert mock_get.call_args.args[0] == "http://catalog.test/customworkout/u1"


@patch("gym_buddy.services.catalog_api.requests.get")
def test_list_workouts_raises_http_error(mock_get, catalog_api_instance):
    mock_response = MagicMock()
    mock_response.status_code = 500
    http_error = requests.exceptions.HTTPError("500 Server Error")
    http_error.response = mock_response
    mock_response.raise_for_status.side_effect = http_error
    mock_get.return_value = mock_response

    with pytest.raises(requests.exceptions.HTTPError) as excinfo:
        catalog_api_instance.list_workouts("u1")
    assert "500" in str(excinfo.value)


@patch("gym_buddy.services.catalog_api.requests.delete")
def test_delete_workout_sends_camel_case_body(mock_delete, catalog_api_instance):
    mock_delete.return_value = MagicMock(status_code=200)

    response = catalog_api_instance.delete_workout("2", "u1")

    assert response is mock_delete.return_value
    assert mock_delete.call_args.args[0] == "http://catalog.test/deleteworkout"
    assert mock_delete.call_args.kwargs["json"] == {"workoutId": "2", "userId": "u1"}


@patch("gym_buddy.services.catalog_api.requests.put")
def test_update_workout_profile_sends_snake_case_body(mock_put, catalog_api_instance):
    mock_put.return_value = MagicMock(status_code=200)

    catalog_api_instance.update_workout_profile("2", "u1", "Leg Day", "desc")

    assert mock_put.call_args.args[0] == "http://catalog.test/updateworkoutprofile"
    assert mock_put.call_args.kwargs["json"] == {
        "workout_id": "2",
        "user_id": "u1",
        "name": "Leg Day",
        "description": "desc",
    }


@patch("gym_buddy.services.catalog_api.requests.post")
def test_create_workout_posts_definition(mock_post, catalog_api_instance):
    mock_post.return_value = MagicMock(status_code=201)

    catalog_api_instance.create_workout("u1", "Arms", "Curls", [{"exercise_id": "ex-1"}])

    assert mock_post.call_args.args[0] == "http://catalog.test/createworkout"
    assert mock_post.call_args.kwargs["json"]["exercises"] == [{"exercise_id": "ex-1"}]
