from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.exceptions import StorageError
from .object_storage import ObjectStorage, StoredObject, check_object_name
from .signing import UrlSigner

logger = logging.getLogger(__name__)


class FileSystemObjectStorage(ObjectStorage):
    """Bucket stored as a directory; content types live in ``<name>.meta.json``."""

    def __init__(self, root_dir: str | Path, bucket: str, *, signer: UrlSigner):
        self.bucket = bucket
        self._dir = Path(root_dir) / bucket
        self._signer = signer

    def ensure_bucket(self) -> None:
        if not self._dir.exists():
            self._dir.mkdir(parents=True, exist_ok=True)
            logger.info("Storage bucket created at %s", self._dir)

    def _path(self, name: str) -> Path:
        return self._dir / check_object_name(name)

    def _meta_path(self, name: str) -> Path:
        return self._dir / f"{check_object_name(name)}.meta.json"

    def upload(self, name: str, data: bytes, *, content_type: str) -> None:
        self.ensure_bucket()
        path = self._path(name)
        try:
            with path.open("xb") as f:
                f.write(data)
        except FileExistsError:
            raise StorageError(f"Object already exists: {name}")
        except OSError as e:
            raise StorageError(f"Failed to write object {name}: {e}")
        self._meta_path(name).write_text(json.dumps({"contentType": content_type}), encoding="utf-8")

    def download(self, name: str) -> StoredObject:
        path = self._path(name)
        if not path.is_file():
            raise StorageError(f"Object not found: {name}")
        content_type = "application/octet-stream"
        meta = self._meta_path(name)
        if meta.is_file():
            content_type = json.loads(meta.read_text(encoding="utf-8")).get("contentType", content_type)
        return StoredObject(name=name, data=path.read_bytes(), content_type=content_type)

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def create_signed_url(self, name: str, *, expires_in: int) -> str:
        return self._signer.sign(bucket=self.bucket, name=check_object_name(name), expires_in=expires_in)

    def verify_signed_token(self, name: str, token: str) -> None:
        self._signer.verify(bucket=self.bucket, name=name, token=token)
