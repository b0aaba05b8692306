from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .models import Club, Credential
from .utils import join_fields, split_fields

logger = logging.getLogger(__name__)


class FlatFileConnector:
    """
    Base connector for the comma-separated text files that back the registry
    and the credential store. One record per line, no header, no quoting.
    """

    def __init__(self, source_config: Dict[str, Any]):
        self.source = source_config
        self.path = Path(self.source["path"])
        self.delimiter = self.source.get("delimiter", ",")
        self.encoding = self.source.get("encoding", "utf-8")

    def fetch(self) -> list:
        raise NotImplementedError

    def _iterate_rows(self) -> Iterable[List[str]]:
        if not self.path.exists():
            raise FileNotFoundError(f"Data file not found: {self.path}")

        with self.path.open("r", encoding=self.encoding) as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                fields = split_fields(line, self.delimiter)
                if not self._accepts(fields):
                    logger.debug("Skipping malformed line %d in %s: %r", line_number, self.path, line)
                    continue
                yield fields

    def _accepts(self, fields: List[str]) -> bool:
        return True


class ClubFileConnector(FlatFileConnector):
    """Reads and rewrites `<name>,<president>,<description>` lines."""

    def _accepts(self, fields: List[str]) -> bool:
        # Anything past the third field is ignored rather than rejected.
        return len(fields) >= 3

    def fetch(self) -> List[Club]:
        return [
            Club(name=name, president=president, description=description)
            for name, president, description, *_ in self._iterate_rows()
        ]

    def write(self, clubs: Iterable[Club]) -> bool:
        lines = [join_fields(club.to_row(), self.delimiter) + "\n" for club in clubs]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding=self.encoding) as handle:
                handle.writelines(lines)
        except OSError as exc:
            logger.error("Failed to save clubs to %s: %s", self.path, exc)
            return False
        logger.debug("Wrote %d clubs to %s", len(lines), self.path)
        return True


class CredentialFileConnector(FlatFileConnector):
    """Reads `<id>,<password>,<role>` lines. Credentials are never written back."""

    def _accepts(self, fields: List[str]) -> bool:
        return len(fields) == 3

    def fetch(self) -> List[Credential]:
        return [
            Credential(user_id=user_id, password=password, role=role)
            for user_id, password, role in self._iterate_rows()
        ]


def build_connector(source_config: Dict[str, Any]) -> FlatFileConnector:
    connectors = {
        "clubs_file": ClubFileConnector,
        "users_file": CredentialFileConnector,
    }
    source_type = source_config.get("type")
    if source_type not in connectors:
        raise ValueError(f"Unsupported data source type: {source_type}")
    return connectors[source_type](source_config)
