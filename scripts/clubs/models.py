from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Role(str, Enum):
    ADMINISTRATOR = "administrator"
    STUDENT = "student"
    CLUB_PRESIDENT = "club-president"


@dataclass
class Member:
    """A pending membership application submitted by a student."""

    name: str
    application_text: str = ""


@dataclass
class Club:
    """A club keyed by its name, with a queue of pending applications."""

    name: str
    president: str = ""
    description: str = ""
    pending_applications: List[Member] = field(default_factory=list)

    def to_row(self) -> List[str]:
        return [self.name, self.president, self.description]


@dataclass(frozen=True)
class Credential:
    user_id: str
    password: str
    role: str
