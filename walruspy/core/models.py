"""
Data models for the Walrus client.

Uses dataclasses for type-safe data structures. Wire payloads use
camelCase keys; from_dict() maps them to snake_case fields.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .crypto import CipherOptions, CipherSuite


@dataclass
class EncryptionOptions:
    """
    Encryption options for storing and retrieving data.

    Attributes:
        key: 16, 24 or 32 byte AES key
        suite: AES256GCM (default) or AES256CBC
        iv: 16 byte IV, required for AES256CBC
    """
    key: bytes
    suite: Union[CipherSuite, str] = CipherSuite.AES256GCM
    iv: Optional[bytes] = None

    def to_cipher_options(self) -> CipherOptions:
        return CipherOptions(
            key=self.key,
            suite=self.suite or CipherSuite.AES256GCM,
            iv=self.iv
        )


@dataclass
class StoreOptions:
    """
    Options for storing data.

    Attributes:
        epochs: Number of storage epochs (omitted from the request when not positive)
        encryption: Encrypt the payload before upload
        content_type: Content-Type of the upload (octet-stream by default)
    """
    epochs: Optional[int] = None
    encryption: Optional[EncryptionOptions] = None
    content_type: Optional[str] = None


@dataclass
class ReadOptions:
    """Options for reading data; encryption must match what was used to store."""
    encryption: Optional[EncryptionOptions] = None


@dataclass
class StorageInfo:
    id: str = ''
    start_epoch: int = 0
    end_epoch: int = 0
    storage_size: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StorageInfo':
        return cls(
            id=data.get('id', ''),
            start_epoch=data.get('startEpoch', 0),
            end_epoch=data.get('endEpoch', 0),
            storage_size=data.get('storageSize', 0),
        )


@dataclass
class BlobObject:
    """A blob object registered on chain for a stored blob."""
    id: str = ''
    stored_epoch: int = 0
    blob_id: str = ''
    size: int = 0
    erasure_code_type: str = ''
    certified_epoch: Optional[int] = None
    storage: StorageInfo = field(default_factory=StorageInfo)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'BlobObject':
        return cls(
            id=data.get('id', ''),
            stored_epoch=data.get('storedEpoch', 0),
            blob_id=data.get('blobId', ''),
            size=data.get('size', 0),
            erasure_code_type=data.get('erasureCodeType', ''),
            certified_epoch=data.get('certifiedEpoch'),
            storage=StorageInfo.from_dict(data.get('storage') or {}),
        )


@dataclass
class EventInfo:
    tx_digest: str = ''
    event_seq: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EventInfo':
        return cls(
            tx_digest=data.get('txDigest', ''),
            event_seq=str(data.get('eventSeq', '')),
        )


@dataclass
class NewlyCreated:
    blob_object: BlobObject
    encoded_size: int = 0
    cost: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NewlyCreated':
        return cls(
            blob_object=BlobObject.from_dict(data.get('blobObject') or {}),
            encoded_size=data.get('encodedSize', 0),
            cost=data.get('cost', 0),
        )


@dataclass
class AlreadyCertified:
    blob_id: str = ''
    event: Optional[EventInfo] = None
    end_epoch: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AlreadyCertified':
        event = data.get('event')
        return cls(
            blob_id=data.get('blobId', ''),
            event=EventInfo.from_dict(event) if event else None,
            end_epoch=data.get('endEpoch', 0),
        )


@dataclass
class BlobInfo:
    blob_id: str = ''
    end_epoch: int = 0


@dataclass
class StoreResponse:
    """
    Response from a store operation.

    Exactly one of newly_created / already_certified is normally set;
    normalize() copies its blob id and end epoch into blob.
    """
    blob: BlobInfo = field(default_factory=BlobInfo)
    newly_created: Optional[NewlyCreated] = None
    already_certified: Optional[AlreadyCertified] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def blob_id(self) -> str:
        return self.blob.blob_id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StoreResponse':
        blob = data.get('blob') or {}
        newly_created = data.get('newlyCreated')
        already_certified = data.get('alreadyCertified')
        response = cls(
            blob=BlobInfo(blob_id=blob.get('blobId', ''), end_epoch=blob.get('endEpoch', 0)),
            newly_created=NewlyCreated.from_dict(newly_created) if newly_created else None,
            already_certified=AlreadyCertified.from_dict(already_certified) if already_certified else None,
            raw=dict(data),
        )
        return response.normalize()

    def normalize(self) -> 'StoreResponse':
        if self.newly_created:
            self.blob.blob_id = self.newly_created.blob_object.blob_id
            self.blob.end_epoch = self.newly_created.blob_object.storage.end_epoch

        if self.already_certified:
            self.blob.blob_id = self.already_certified.blob_id
            self.blob.end_epoch = self.already_certified.end_epoch

        return self


@dataclass
class BlobMetadata:
    """Blob metadata taken from HEAD response headers."""
    content_length: int = 0
    content_type: str = ''
    last_modified: str = ''
    etag: str = ''

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> 'BlobMetadata':
        """Build from lower-cased response headers."""
        try:
            content_length = int(headers.get('content-length', '0') or 0)
        except ValueError:
            content_length = 0
        return cls(
            content_length=content_length,
            content_type=headers.get('content-type', ''),
            last_modified=headers.get('last-modified', ''),
            etag=headers.get('etag', ''),
        )
