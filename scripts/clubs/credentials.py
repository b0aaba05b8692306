from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Union

from .models import Credential, Role


class AuthResult(str, Enum):
    OK = "ok"
    INVALID_CREDENTIALS = "invalid_credentials"
    WRONG_ROLE = "wrong_role"


class CredentialStore:
    """
    Read-only id -> password and id -> role lookup.
    Passwords are stored and compared as plaintext.
    """

    def __init__(self, credentials: Optional[Iterable[Credential]] = None):
        self._passwords: Dict[str, str] = {}
        self._roles: Dict[str, str] = {}
        for credential in credentials or []:
            self._passwords[credential.user_id] = credential.password
            self._roles[credential.user_id] = credential.role

    def check(self, user_id: str, password: str, required_role: Union[Role, str]) -> AuthResult:
        if user_id not in self._passwords or self._passwords[user_id] != password:
            return AuthResult.INVALID_CREDENTIALS
        if self._roles.get(user_id) != _role_value(required_role):
            return AuthResult.WRONG_ROLE
        return AuthResult.OK

    def authenticate(self, user_id: str, password: str, required_role: Union[Role, str]) -> bool:
        return self.check(user_id, password, required_role) is AuthResult.OK

    def role_of(self, user_id: str) -> Optional[str]:
        return self._roles.get(user_id)

    def __len__(self) -> int:
        return len(self._passwords)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._passwords


def _role_value(role: Union[Role, str]) -> str:
    return getattr(role, "value", role)
