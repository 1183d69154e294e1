# users_api/db/firestore.py

import logging

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore
from google.oauth2 import service_account

from users_api.db.store import (
    ScanResult,
    StartupFailure,
    StoreError,
    UserNotFound,
    UserStore,
    record_from_document,
)
from users_api.models.users import UserOut, UserRecord

logger = logging.getLogger(__name__)

# Errors the client raises for a failed call. ValueError covers ids that
# do not form a valid document path (empty, or containing "/").
CLIENT_ERRORS = (GoogleAPIError, GoogleAuthError, ValueError)


def create_client(credentials_path: str, project_id: str) -> firestore.Client:
    try:
        credentials = service_account.Credentials.from_service_account_file(
            credentials_path
        )
        return firestore.Client(project=project_id, credentials=credentials)
    except (OSError, ValueError, GoogleAuthError) as e:
        raise StartupFailure(f"Failed to initialize Firestore: {e}") from e


class FirestoreUserStore(UserStore):
    def __init__(self, client: firestore.Client, collection: str = "users"):
        self.client = client
        self.collection_name = collection

    @property
    def collection(self):
        return self.client.collection(self.collection_name)

    def add_user(self, user: UserRecord) -> str:
        try:
            # Firestore generates the document id
            _, doc_ref = self.collection.add(user.model_dump())
        except CLIENT_ERRORS as e:
            raise StoreError(f"Error adding user: {e}") from e
        return doc_ref.id

    def get_user(self, user_id: str) -> UserRecord:
        try:
            snapshot = self.collection.document(user_id).get()
        except CLIENT_ERRORS as e:
            raise StoreError(f"Error reading user {user_id!r}: {e}") from e

        if not snapshot.exists:
            raise UserNotFound(user_id)

        return record_from_document(snapshot.to_dict())

    def scan_users(self) -> ScanResult:
        result = ScanResult()
        try:
            for snapshot in self.collection.stream():
                result.users.append(
                    UserOut(id=snapshot.id, user=record_from_document(snapshot.to_dict()))
                )
        except CLIENT_ERRORS as e:
            result.error = StoreError(f"Scan of {self.collection_name!r} stopped: {e}")
            result.error.__cause__ = e
        return result

    def close(self) -> None:
        self.client.close()
