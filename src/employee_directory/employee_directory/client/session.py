from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SessionStore:
    """Keeps ``{accessToken, user}`` in a JSON file between runs.

    There is no expiry check; a stale token surfaces as a 401 on the next call.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[dict]:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Ignoring unreadable session file %s", self._path)
            return None
        if not isinstance(data, dict) or not data.get("accessToken"):
            return None
        return data

    def save(self, access_token: str, user: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({"accessToken": access_token, "user": user}), encoding="utf-8")

    def clear(self) -> None:
        # sign-out is local only
        self._path.unlink(missing_ok=True)
