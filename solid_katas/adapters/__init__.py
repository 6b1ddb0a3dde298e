from solid_katas.adapters.credentials import (
    Argon2CredentialVerifier,
    PlainCredentialVerifier,
)
from solid_katas.adapters.dev_charge import DevChargeAdapter
from solid_katas.adapters.dev_notifier import DevNotifier, SentNotification
from solid_katas.adapters.memory_store import InMemoryRecordStore, StoredRecord

__all__ = [
    "Argon2CredentialVerifier",
    "DevChargeAdapter",
    "DevNotifier",
    "InMemoryRecordStore",
    "PlainCredentialVerifier",
    "SentNotification",
    "StoredRecord",
]
