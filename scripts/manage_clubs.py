"""
Club Management Console
-----------------------

Interactive terminal front end for the club registry. Mirrors the desktop
flow: pick a role, log in, then use the menu for that role until logout.

Usage:
    python scripts/manage_clubs.py --clubs-file data/clubs_data.txt --users-file data/users_data.txt
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from clubs.credentials import AuthResult
from clubs.models import Role
from clubs.service import ClubService
from config import clubs_data_path, users_data_path

logger = logging.getLogger(__name__)

ROLE_CHOICES = {
    "1": Role.ADMINISTRATOR,
    "2": Role.STUDENT,
    "3": Role.CLUB_PRESIDENT,
}

ROLE_LABELS = {
    Role.ADMINISTRATOR: "Administrator",
    Role.STUDENT: "Student",
    Role.CLUB_PRESIDENT: "Club president",
}


class ConsoleExit(Exception):
    """Raised when input is exhausted or the user picks exit."""


class ClubConsole:
    def __init__(
        self,
        service: ClubService,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self._input = input_func or input
        self._output = output or print

    def run(self) -> None:
        try:
            while True:
                role = self.choose_role()
                if role is None:
                    continue
                if self.login(role):
                    self.role_menu(role)
        except ConsoleExit:
            self._output("Goodbye.")

    def ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError:
            raise ConsoleExit()

    def choose_role(self) -> Optional[Role]:
        self._output("")
        self._output("=== Club Management System ===")
        for key, role in ROLE_CHOICES.items():
            self._output(f"{key}. {ROLE_LABELS[role]}")
        self._output("0. Exit")
        choice = self.ask("Select role: ")
        if choice == "0":
            raise ConsoleExit()
        role = ROLE_CHOICES.get(choice)
        if role is None:
            self._output("Unknown option.")
        return role

    def login(self, role: Role) -> bool:
        user_id = self.ask("ID: ")
        password = self.ask("Password: ")
        result = self.service.login(user_id, password, role)
        if result is AuthResult.INVALID_CREDENTIALS:
            self._output("Invalid ID or password.")
            return False
        if result is AuthResult.WRONG_ROLE:
            self._output(f"This account is not registered as {ROLE_LABELS[role].lower()}.")
            return False
        self._output(f"Welcome, {user_id}.")
        return True

    def role_menu(self, role: Role) -> None:
        if role is Role.ADMINISTRATOR:
            self.admin_menu()
        elif role is Role.STUDENT:
            self.student_menu()
        else:
            self.president_menu()

    def admin_menu(self) -> None:
        actions = {"1": self.add_club, "2": self.remove_club, "3": self.list_clubs}
        self._menu("Administrator", ["1. Add club", "2. Remove club", "3. List clubs"], actions)

    def student_menu(self) -> None:
        actions = {"1": self.list_clubs, "2": self.apply_to_club}
        self._menu("Student", ["1. List clubs", "2. Apply to a club"], actions)

    def president_menu(self) -> None:
        club_name = self.ask("Club name: ")
        if not club_name:
            return
        if self.service.get_club(club_name) is None:
            self._output(f"Club '{club_name}' does not exist.")
            return
        actions = {
            "1": lambda: self.show_applications(club_name),
            "2": lambda: self.approve_application(club_name),
        }
        self._menu(f"President of {club_name}", ["1. View applications", "2. Approve application"], actions)

    def _menu(self, title: str, lines, actions) -> None:
        while True:
            self._output("")
            self._output(f"--- {title} ---")
            for line in lines:
                self._output(line)
            self._output("0. Logout")
            choice = self.ask("Select: ")
            if choice == "0":
                self._output("Logged out.")
                return
            action = actions.get(choice)
            if action is None:
                self._output("Unknown option.")
                continue
            action()

    def add_club(self) -> None:
        name = self.ask("Club name: ")
        president = self.ask("President: ")
        description = self.ask("Description: ")
        if not (name and president and description):
            return
        self.service.add_club(name, president, description)
        self._output(f"Club '{name}' added.")

    def remove_club(self) -> None:
        name = self.ask("Club name to remove: ")
        if not name:
            return
        if self.service.remove_club(name):
            self._output(f"Club '{name}' removed.")
        else:
            self._output(f"Club '{name}' does not exist.")

    def list_clubs(self) -> None:
        clubs = self.service.list_clubs()
        if not clubs:
            self._output("No clubs registered.")
            return
        self._output(f"{'Name':<20} {'President':<15} Description")
        for club in clubs:
            self._output(f"{club.name:<20} {club.president:<15} {club.description}")

    def apply_to_club(self) -> None:
        club_name = self.ask("Club name: ")
        applicant = self.ask("Your name: ")
        text = self.ask("Application: ")
        if not (club_name and applicant and text):
            return
        if self.service.submit_application(club_name, applicant, text) is None:
            self._output(f"Club '{club_name}' does not exist.")
            return
        self._output(f"Application to '{club_name}' submitted.")

    def show_applications(self, club_name: str) -> None:
        applications = self.service.pending_applications(club_name) or []
        if not applications:
            self._output("No pending applications.")
            return
        for member in applications:
            self._output(f"- {member.name}: {member.application_text}")

    def approve_application(self, club_name: str) -> None:
        applicant = self.ask("Applicant name: ")
        if not applicant:
            return
        member = self.service.approve_application(club_name, applicant)
        if member is None:
            self._output(f"No pending application from '{applicant}'.")
        else:
            self._output(f"Approved {member.name}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage university clubs from the terminal.")
    parser.add_argument("--clubs-file", type=Path, default=None, help="Club data file (default data/clubs_data.txt).")
    parser.add_argument("--users-file", type=Path, default=None, help="User credential file (default data/users_data.txt).")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    clubs_path = args.clubs_file or clubs_data_path()
    users_path = args.users_file or users_data_path()
    logger.debug("Using club file %s and user file %s", clubs_path, users_path)

    service = ClubService.from_paths(clubs_path, users_path)
    service.load()
    ClubConsole(service).run()


if __name__ == "__main__":
    main()
