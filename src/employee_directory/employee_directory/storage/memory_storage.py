from __future__ import annotations

from ..core.exceptions import StorageError
from .object_storage import ObjectStorage, StoredObject, check_object_name
from .signing import UrlSigner


class InMemoryObjectStorage(ObjectStorage):
    def __init__(self, bucket: str, *, signer: UrlSigner):
        self.bucket = bucket
        self._signer = signer
        self.objects: dict[str, StoredObject] = {}

    def upload(self, name: str, data: bytes, *, content_type: str) -> None:
        check_object_name(name)
        if name in self.objects:
            raise StorageError(f"Object already exists: {name}")
        self.objects[name] = StoredObject(name=name, data=bytes(data), content_type=content_type)

    def download(self, name: str) -> StoredObject:
        try:
            return self.objects[name]
        except KeyError:
            raise StorageError(f"Object not found: {name}")

    def exists(self, name: str) -> bool:
        return name in self.objects

    def create_signed_url(self, name: str, *, expires_in: int) -> str:
        return self._signer.sign(bucket=self.bucket, name=check_object_name(name), expires_in=expires_in)

    def verify_signed_token(self, name: str, token: str) -> None:
        self._signer.verify(bucket=self.bucket, name=name, token=token)
