"""Tests for client data models."""
from walruspy.core.crypto import CipherSuite
from walruspy.core.models import (
    BlobMetadata,
    EncryptionOptions,
    StoreResponse,
)


class TestStoreResponse:
    """Test suite for StoreResponse parsing and normalization."""

    def test_newly_created(self, store_payload):
        """Test blob info is filled from newlyCreated."""
        response = StoreResponse.from_dict(store_payload)

        assert response.blob_id == 'blob_123'
        assert response.blob.end_epoch == 15
        assert response.newly_created.cost == 132300
        assert response.newly_created.blob_object.storage.storage_size == 66034000
        assert response.already_certified is None

    def test_already_certified(self, certified_payload):
        """Test blob info is filled from alreadyCertified."""
        response = StoreResponse.from_dict(certified_payload)

        assert response.blob_id == 'blob_456'
        assert response.blob.end_epoch == 30
        assert response.already_certified.event.tx_digest == '4XQHF'

    def test_empty_payload(self):
        """Test an unknown payload still has a blob entry."""
        response = StoreResponse.from_dict({})

        assert response.blob_id == ''
        assert response.blob.end_epoch == 0

    def test_keeps_raw(self, store_payload):
        """Test the raw payload is kept for callers."""
        assert StoreResponse.from_dict(store_payload).raw == store_payload


class TestBlobMetadata:
    """Test suite for BlobMetadata."""

    def test_from_headers(self):
        """Test metadata fields map from headers."""
        meta = BlobMetadata.from_headers({
            'content-length': '1024',
            'content-type': 'image/png',
            'last-modified': 'Tue, 01 Oct 2024 10:00:00 GMT',
            'etag': '"abc"',
        })

        assert meta.content_length == 1024
        assert meta.content_type == 'image/png'
        assert meta.etag == '"abc"'

    def test_missing_headers(self):
        """Test defaults when headers are absent."""
        meta = BlobMetadata.from_headers({})

        assert meta.content_length == 0
        assert meta.content_type == ''


class TestEncryptionOptions:
    """Test suite for EncryptionOptions."""

    def test_defaults_to_gcm(self):
        """Test GCM is the default suite."""
        options = EncryptionOptions(key=bytes(32)).to_cipher_options()

        assert options.suite == CipherSuite.AES256GCM
        assert options.iv is None

    def test_none_suite_falls_back(self):
        """Test an explicit None suite falls back to GCM."""
        options = EncryptionOptions(key=bytes(32), suite=None).to_cipher_options()

        assert options.suite == CipherSuite.AES256GCM

    def test_passes_iv(self):
        """Test IV is carried over for CBC."""
        options = EncryptionOptions(key=bytes(32), suite=CipherSuite.AES256CBC, iv=bytes(16))

        assert options.to_cipher_options().iv == bytes(16)
