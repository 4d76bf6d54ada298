import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables based on ENV setting
env = os.getenv("ENV", "development")
env_file = (
    ".env.production"
    if env == "production"
    else (
        ".env.staging" if env == "staging" else ".env.local"
    )  # Default to local development
)

logger.info(f"Environment: {env}")

if os.path.exists(env_file):
    logger.info(f"Loading environment from {env_file}")
    load_dotenv(dotenv_path=env_file)
else:
    logger.info(f"Environment file {env_file} not found")
    # Fallback to .env if specific file doesn't exist
    if os.path.exists(".env"):
        logger.info("Falling back to .env")
        load_dotenv(dotenv_path=".env")
    else:
        logger.warning("No environment file found!")

if os.getenv("ENV") == "production" and not os.getenv("CATALOG_API_URL"):
    raise EnvironmentError("Missing CATALOG_API_URL for production environment")

# Remote catalog configuration
CATALOG_API_URL = os.getenv("CATALOG_API_URL", "http://localhost:3000")
CATALOG_API_TIMEOUT = float(os.getenv("CATALOG_API_TIMEOUT", "10"))

# Handoff store configuration ("file" or "couchdb")
HANDOFF_BACKEND = os.getenv("HANDOFF_BACKEND", "file")
HANDOFF_PATH = os.getenv("HANDOFF_PATH", ".gym_buddy_session.json")

# CouchDB Configuration
COUCHDB_URL = os.getenv("COUCHDB_URL", "http://localhost:5984")
COUCHDB_USER = os.getenv("COUCHDB_USER", "admin")
COUCHDB_PASSWORD = os.getenv("COUCHDB_PASSWORD", "admin")
COUCHDB_DB = os.getenv("COUCHDB_DB", "gym_buddy")

# Log the values being set
logger.info("Environment variables loaded:")
logger.info(f"CATALOG_API_URL: {CATALOG_API_URL}")
logger.info(f"HANDOFF_BACKEND: {HANDOFF_BACKEND}")
logger.info(
    f"COUCHDB_PASSWORD: {'*' * len(COUCHDB_PASSWORD) if COUCHDB_PASSWORD else None}"
)
