# Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from solid_katas.core.ports.charge import ChargePort, ChargeRecord
from solid_katas.core.ports.credentials import CredentialVerifierPort
from solid_katas.core.ports.notify import NotifierPort
from solid_katas.core.ports.store import RecordStorePort

__all__ = [
    "ChargePort",
    "ChargeRecord",
    "CredentialVerifierPort",
    "NotifierPort",
    "RecordStorePort",
]
