"""
Pytest configuration and fixtures for club manager tests
"""

import pytest
import sys
from pathlib import Path

# Scripts directory holds the importable modules; the root holds api/
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))
sys.path.insert(0, str(PROJECT_ROOT))

from clubs.service import ClubService  # noqa: E402


@pytest.fixture(scope="function")
def clubs_file(tmp_path):
    """Club data file with two valid records and one short line"""
    path = tmp_path / "clubs_data.txt"
    path.write_text(
        "Chess,Kim,desc1\n"
        "Broken,OnlyTwo\n"
        "Art,Lee,desc2\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(scope="function")
def users_file(tmp_path):
    """Credential file with one user per role"""
    path = tmp_path / "users_data.txt"
    path.write_text(
        "admin,admin123,administrator\n"
        "student1,pass1,student\n"
        "president1,pres123,club-president\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(scope="function")
def service(clubs_file, users_file):
    """Loaded service backed by temp files"""
    svc = ClubService.from_paths(clubs_file, users_file)
    svc.load()
    return svc
