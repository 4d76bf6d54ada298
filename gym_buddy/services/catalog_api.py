import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from gym_buddy.config.config import CATALOG_API_TIMEOUT, CATALOG_API_URL

logger = logging.getLogger(__name__)


class CatalogAPI:
    """Service for interacting with the remote exercise and workout catalog."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize the catalog API client.

        Args:
            base_url: Root URL of the catalog service (default: CATALOG_API_URL)
            timeout: Per-request timeout in seconds (default: CATALOG_API_TIMEOUT)
        """
        self.base_url = (base_url or CATALOG_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else CATALOG_API_TIMEOUT
        self.headers = {"Content-Type": "application/json"}

    def list_exercises(self) -> List[Dict[str, Any]]:
        """
        Get the full exercise collection.

        Returns:
            List of raw exercise dictionaries

        Raises:
            requests.exceptions.RequestException: On transport or HTTP errors
        """
        url = f"{self.base_url}/exercises"
        logger.info(f"Fetching exercises from {url}")

        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def list_workouts(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get every workout visible to a user, templates included.

        Args:
            user_id: ID of the user whose workouts to fetch

        Returns:
            List of raw workout dictionaries

        Raises:
            requests.exceptions.RequestException: On transport or HTTP errors
        """
        url = f"{self.base_url}/customworkout/{user_id}"
        logger.info(f"Fetching workouts for user {user_id}")

        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def create_workout(
        self,
        user_id: str,
        name: str,
        description: str,
        exercises: Sequence[Dict[str, Any]] = (),
    ) -> requests.Response:
        """Create a new custom workout.

        Args:
            user_id: Owner of the new workout
            name: Workout name
            description: Workout description
            exercises: Raw exercise entries in wire format

        Returns:
            The response; the caller inspects its status
        """
        url = f"{self.base_url}/createworkout"
        body = {
            "user_id": user_id,
            "name": name,
            "description": description,
            "exercises": list(exercises),
        }
        logger.info(f"Creating workout: {name}")
        logger.debug(f"Request data: {json.dumps(body, indent=2)}")

        response = requests.post(
            url, headers=self.headers, json=body, timeout=self.timeout
        )
        logger.debug(f"Response status code: {response.status_code}")
        return response

    def delete_workout(self, workout_id: str, user_id: str) -> requests.Response:
        """
        Delete a custom workout.

        Args:
            workout_id: ID of the workout to delete
            user_id: Owner of the workout

        Returns:
            The response; the caller inspects its status
        """
        url = f"{self.base_url}/deleteworkout"
        body = {"workoutId": workout_id, "userId": user_id}
        logger.info(f"Deleting workout {workout_id}")

        response = requests.delete(
            url, headers=self.headers, json=body, timeout=self.timeout
        )
        logger.debug(f"Response status code: {response.status_code}")
        return response

    def update_workout_profile(
        self, workout_id: str, user_id: str, name: str, description: str
    ) -> requests.Response:
        """
        Update the name and description of a custom workout.

        Args:
            workout_id: ID of the workout to update
            user_id: Owner of the workout
            name: New name
            description: New description

        Returns:
            The response; the caller inspects its status
        """
        url = f"{self.base_url}/updateworkoutprofile"
        body = {
            "workout_id": workout_id,
            "user_id": user_id,
            "name": name,
            "description": description,
        }
        logger.info(f"Updating workout profile {workout_id}")
        logger.debug(f"Request data: {json.dumps(body, indent=2)}")

        response = requests.put(
            url, headers=self.headers, json=body, timeout=self.timeout
        )
        logger.debug(f"Response status code: {response.status_code}")
        return response
