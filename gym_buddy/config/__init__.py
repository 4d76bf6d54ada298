"""
Configuration package for the Gym Buddy workouts screen.
"""

from .config import (
    CATALOG_API_TIMEOUT,
    CATALOG_API_URL,
    COUCHDB_DB,
    COUCHDB_PASSWORD,
    COUCHDB_URL,
    COUCHDB_USER,
    HANDOFF_BACKEND,
    HANDOFF_PATH,
)
