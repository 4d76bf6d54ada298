import logging
from typing import Any, Dict, Optional, Tuple

import couchdb

from gym_buddy.config.config import (
    COUCHDB_DB,
    COUCHDB_PASSWORD,
    COUCHDB_URL,
    COUCHDB_USER,
)

logger = logging.getLogger(__name__)


class Database:
    def __init__(
        self,
        url: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        db_name: Optional[str] = None,
        db: Any = None,
    ):
        """Initialize the database connection.

        Args:
            url: CouchDB server URL (default: COUCHDB_URL)
            user: CouchDB user (default: COUCHDB_USER)
            password: CouchDB password (default: COUCHDB_PASSWORD)
            db_name: Database name (default: COUCHDB_DB)
            db: An already opened database handle; skips connecting when given
        """
        self.couchdb_url = url or COUCHDB_URL
        self.couchdb_user = user if user is not None else COUCHDB_USER
        self.couchdb_password = password if password is not None else COUCHDB_PASSWORD
        self.db_name = db_name or COUCHDB_DB

        if db is not None:
            self.db = db
            return

        try:
            self.server = couchdb.Server(self.couchdb_url)
            if self.couchdb_user and self.couchdb_password:
                self.server.resource.credentials = (
                    self.couchdb_user,
                    self.couchdb_password,
                )
                logger.info(
                    f"Connecting to CouchDB at {self.couchdb_url} using user: {self.couchdb_user}"
                )
            else:
                logger.info(f"Connecting to CouchDB at {self.couchdb_url}")

            # Ensure database exists
            if self.db_name in self.server:
                self.db = self.server[self.db_name]
            else:
                logger.info(f"Database {self.db_name} does not exist. Creating...")
                self.db = self.server.create(self.db_name)

        except Exception as e:
            logger.error(f"Error connecting to CouchDB: {e}")
            raise

    def save_document(
        self, doc: Dict[str, Any], doc_id: Optional[str] = None
    ) -> Tuple[str, str]:
        """Save a document to the database."""
        if doc_id:
            doc["_id"] = doc_id
        try:
            doc_id, doc_rev = self.db.save(doc)
            logger.info(f"Document saved successfully. ID: {doc_id}, Rev: {doc_rev}")
            return doc_id, doc_rev
        except Exception as e:
            logger.error(f"Error saving document: {str(e)}")
            raise

    def get_document(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a document by ID."""
        try:
            doc = self.db[doc_id]
            logger.debug(f"Document retrieved successfully: {doc_id}")
            return doc
        except couchdb.http.ResourceNotFound:
            logger.warning(f"Document not found: {doc_id}")
            return None
        except Exception as e:
            logger.error(f"Error retrieving document: {str(e)}")
            raise
