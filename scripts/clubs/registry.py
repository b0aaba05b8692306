from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .models import Club

logger = logging.getLogger(__name__)


class ClubRegistry:
    """
    In-memory mapping of club name to Club.

    Adding a club whose name is already present replaces the existing record
    (pending applications included). Lookups and removals of unknown names
    return None/False instead of raising.
    """

    def __init__(self, clubs: Optional[Iterable[Club]] = None):
        self._clubs: Dict[str, Club] = {}
        for club in clubs or []:
            self.add(club)

    def add(self, club: Club) -> None:
        if club.name in self._clubs:
            logger.info("Replacing existing club %s", club.name)
        self._clubs[club.name] = club

    def remove(self, name: str) -> bool:
        return self._clubs.pop(name, None) is not None

    def get(self, name: str) -> Optional[Club]:
        return self._clubs.get(name)

    def list_all(self) -> List[Club]:
        return list(self._clubs.values())

    def clear(self) -> None:
        self._clubs.clear()

    def __len__(self) -> int:
        return len(self._clubs)

    def __contains__(self, name: object) -> bool:
        return name in self._clubs
