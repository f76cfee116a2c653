"""
Repositories for cycle profiles and log entries.

Both repositories share one DynamoDB table keyed by ``PK=USER#<id>``.
Profiles live under ``SK=PROFILE`` and entries under ``SK=ENTRY#<id>``, so
an entry can only ever be read or changed through its owner's partition.

Typical usage:
    dynamo = get_dynamo()
    profile = ProfileRepository(dynamo).get(user_id)
    entries = CycleLogRepository(dynamo).list(user_id, limit=90)
"""
from typing import Any, Dict, List, Optional

import botocore.exceptions
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key

from src.models.entry import CycleLogEntry, CycleLogEntryCreate, CycleLogEntryUpdate
from src.models.profile import UserCycleProfile
from src.services.exceptions import EntryNotFoundError, StorageError
from src.utils.dynamo import (
    DynamoDBClient,
    PROFILE_SK,
    ENTRY_SK_PREFIX,
    create_pk,
    create_entry_sk,
    to_dynamo_item
)

logger = Logger()

def _storage_error(operation: str, user_id: str, error: botocore.exceptions.ClientError) -> StorageError:
    error_code = error.response.get('Error', {}).get('Code')
    error_msg = error.response.get('Error', {}).get('Message')
    logger.error("DynamoDB access error", extra={
        "user_id": user_id,
        "operation": operation,
        "error_code": error_code,
        "error_message": error_msg
    })
    return StorageError(f"DynamoDB error ({error_code}): {error_msg}")

class ProfileRepository:
    """Stores one cycle profile per user."""

    def __init__(self, dynamo: DynamoDBClient):
        self.dynamo = dynamo

    def get(self, user_id: str) -> Optional[UserCycleProfile]:
        """
        Load a user's profile.

        Returns:
            The profile, or None if the user has none
        """
        try:
            item = self.dynamo.get_item({"PK": create_pk(user_id), "SK": PROFILE_SK})
        except botocore.exceptions.ClientError as e:
            raise _storage_error("get_profile", user_id, e) from e

        if not item:
            return None
        return UserCycleProfile(**item)

    def save(self, profile: UserCycleProfile) -> UserCycleProfile:
        """Create or replace a user's profile."""
        try:
            self.dynamo.put_item({
                "PK": create_pk(profile.user_id),
                "SK": PROFILE_SK,
                **to_dynamo_item(profile.model_dump(mode="json"))
            })
        except botocore.exceptions.ClientError as e:
            raise _storage_error("save_profile", profile.user_id, e) from e

        logger.info("Saved profile", extra={"user_id": profile.user_id})
        return profile

class CycleLogRepository:
    """Stores daily log entries, scoped to their owner."""

    def __init__(self, dynamo: DynamoDBClient):
        self.dynamo = dynamo

    def list(self, user_id: str, limit: Optional[int] = None) -> List[CycleLogEntry]:
        """
        List a user's entries, newest date first.

        Args:
            user_id: Owner of the entries
            limit: Optional maximum number of entries to return

        Returns:
            Entries sorted by date (then creation time) descending

        Raises:
            ValueError: If ``limit`` is given and below 1
        """
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer")

        try:
            items = self.dynamo.query_items(
                partition_key="PK",
                partition_value=create_pk(user_id),
                sort_key_condition=Key("SK").begins_with(ENTRY_SK_PREFIX)
            )
        except botocore.exceptions.ClientError as e:
            raise _storage_error("list_entries", user_id, e) from e

        entries = sorted(
            (CycleLogEntry(**item) for item in items),
            key=lambda e: (e.date, e.created_at),
            reverse=True
        )
        if limit is not None:
            entries = entries[:limit]
        return entries

    def get(self, user_id: str, entry_id: str) -> CycleLogEntry:
        """
        Load a single entry owned by ``user_id``.

        Raises:
            EntryNotFoundError: If the entry does not exist for this user
        """
        try:
            item = self.dynamo.get_item({"PK": create_pk(user_id), "SK": create_entry_sk(entry_id)})
        except botocore.exceptions.ClientError as e:
            raise _storage_error("get_entry", user_id, e) from e

        if not item:
            raise EntryNotFoundError(f"Entry {entry_id} not found")
        return CycleLogEntry(**item)

    def _put(self, entry: CycleLogEntry) -> None:
        try:
            self.dynamo.put_item({
                "PK": create_pk(entry.user_id),
                "SK": create_entry_sk(entry.entry_id),
                **to_dynamo_item(entry.model_dump(mode="json"))
            })
        except botocore.exceptions.ClientError as e:
            raise _storage_error("put_entry", entry.user_id, e) from e

    def create(self, user_id: str, payload: CycleLogEntryCreate) -> CycleLogEntry:
        """Store a new entry for ``user_id``."""
        entry = CycleLogEntry(user_id=user_id, **payload.model_dump())
        self._put(entry)
        logger.info("Created log entry", extra={
            "user_id": user_id,
            "entry_id": entry.entry_id,
            "date": entry.date.isoformat()
        })
        return entry

    def update(self, user_id: str, entry_id: str, update: CycleLogEntryUpdate) -> CycleLogEntry:
        """
        Apply a partial update to an entry.

        Raises:
            EntryNotFoundError: If the entry does not exist for this user
            pydantic.ValidationError: If the merged entry is invalid
        """
        existing = self.get(user_id, entry_id)
        changes: Dict[str, Any] = update.model_dump(exclude_unset=True)
        # identity fields are never taken from the update
        updated = CycleLogEntry(**{
            **existing.model_dump(),
            **changes,
            "entry_id": existing.entry_id,
            "user_id": existing.user_id,
            "created_at": existing.created_at
        })
        self._put(updated)
        logger.info("Updated log entry", extra={
            "user_id": user_id,
            "entry_id": entry_id,
            "changed_fields": sorted(changes)
        })
        return updated

    def delete(self, user_id: str, entry_id: str) -> None:
        """
        Delete an entry.

        Raises:
            EntryNotFoundError: If the entry does not exist for this user
        """
        self.get(user_id, entry_id)
        try:
            self.dynamo.delete_item({"PK": create_pk(user_id), "SK": create_entry_sk(entry_id)})
        except botocore.exceptions.ClientError as e:
            raise _storage_error("delete_entry", user_id, e) from e
        logger.info("Deleted log entry", extra={"user_id": user_id, "entry_id": entry_id})
