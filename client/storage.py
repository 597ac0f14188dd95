"""
Credential store — keeps the current token and user in a JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from auth.models import UserProfile

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".auth-client" / "credentials.json"


class CredentialStore:
    def __init__(self, path: Path | str = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.is_file():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable credentials file %s", self.path)
            return {}

    def set_token_and_user(self, token: str, user: UserProfile) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"token": token, "user": user.model_dump()}
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        self.path.chmod(0o600)

    def get_stored_token(self) -> Optional[str]:
        return self._read().get("token")

    def get_stored_user(self) -> Optional[UserProfile]:
        user = self._read().get("user")
        return UserProfile.model_validate(user) if user else None

    def is_authenticated(self) -> bool:
        return bool(self.get_stored_token()) and self.get_stored_user() is not None

    def logout(self) -> None:
        self.path.unlink(missing_ok=True)
