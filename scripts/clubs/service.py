"""
Request/response facade over the club registry, membership workflow and
credential store. The console and the HTTP API both talk to this class and
never touch the registry or the data files directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from . import membership
from .connectors import ClubFileConnector, CredentialFileConnector, build_connector
from .credentials import AuthResult, CredentialStore
from .models import Club, Member
from .registry import ClubRegistry

logger = logging.getLogger(__name__)


class ClubService:
    def __init__(
        self,
        club_connector: ClubFileConnector,
        credential_connector: CredentialFileConnector,
        registry: Optional[ClubRegistry] = None,
        credentials: Optional[CredentialStore] = None,
    ):
        self.club_connector = club_connector
        self.credential_connector = credential_connector
        self.registry = registry if registry is not None else ClubRegistry()
        self.credentials = credentials if credentials is not None else CredentialStore()

    @classmethod
    def from_paths(cls, clubs_path: Path, users_path: Path) -> "ClubService":
        return cls(
            club_connector=build_connector({"type": "clubs_file", "path": clubs_path}),
            credential_connector=build_connector({"type": "users_file", "path": users_path}),
        )

    def load(self) -> None:
        """Load credentials, then clubs. A missing or unreadable file leaves that store empty."""
        try:
            self.credentials = CredentialStore(self.credential_connector.fetch())
            logger.info("Loaded %d users from %s", len(self.credentials), self.credential_connector.path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not load users: %s", exc)
            self.credentials = CredentialStore()

        self.registry.clear()
        try:
            for club in self.club_connector.fetch():
                self.registry.add(club)
            logger.info("Loaded %d clubs from %s", len(self.registry), self.club_connector.path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not load initial club data: %s", exc)
            self.registry.clear()

    def save(self) -> bool:
        return self.club_connector.write(self.registry.list_all())

    def login(self, user_id: str, password: str, role: str) -> AuthResult:
        result = self.credentials.check(user_id, password, role)
        if result is not AuthResult.OK:
            logger.info("Login rejected for %s (%s)", user_id, result.value)
        return result

    def list_clubs(self) -> List[Club]:
        return self.registry.list_all()

    def get_club(self, name: str) -> Optional[Club]:
        return self.registry.get(name)

    def add_club(self, name: str, president: str, description: str) -> Club:
        club = Club(name=name, president=president, description=description)
        self.registry.add(club)
        self.save()
        logger.info("Added club %s", name)
        return club

    def remove_club(self, name: str) -> bool:
        removed = self.registry.remove(name)
        if removed:
            self.save()
            logger.info("Removed club %s", name)
        return removed

    def submit_application(self, club_name: str, applicant: str, text: str) -> Optional[Member]:
        club = self.registry.get(club_name)
        if club is None:
            return None
        return membership.submit(club, applicant, text)

    def pending_applications(self, club_name: str) -> Optional[List[Member]]:
        club = self.registry.get(club_name)
        if club is None:
            return None
        return membership.pending(club)

    def approve_application(self, club_name: str, applicant: str) -> Optional[Member]:
        club = self.registry.get(club_name)
        if club is None:
            return None
        member = membership.approve(club, applicant)
        if member is not None:
            logger.info("Approved %s for %s", applicant, club_name)
        return member
