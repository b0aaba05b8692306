"""
Terminal console tests driven by scripted input
"""


import manage_clubs
from manage_clubs import ClubConsole
from clubs.models import Member


def run_console(service, answers):
    """Feed answers to the console; input runs out with EOFError like a closed stdin."""
    replies = iter(answers)
    output = []

    def fake_input(prompt):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    ClubConsole(service, input_func=fake_input, output=output.append).run()
    return "\n".join(output)


class TestLoginFlow:
    def test_exit_immediately(self, service):
        text = run_console(service, ["0"])
        assert "Goodbye." in text

    def test_invalid_credentials(self, service):
        text = run_console(service, ["1", "admin", "wrong", "0"])
        assert "Invalid ID or password." in text

    def test_wrong_role(self, service):
        text = run_console(service, ["1", "student1", "pass1", "0"])
        assert "not registered as administrator" in text

    def test_unknown_role_option(self, service):
        text = run_console(service, ["9", "0"])
        assert "Unknown option." in text

    def test_eof_exits_cleanly(self, service):
        text = run_console(service, ["1", "admin"])
        assert text.endswith("Goodbye.")


class TestAdminMenu:
    def test_add_list_remove(self, service, clubs_file):
        text = run_console(service, [
            "1", "admin", "admin123",
            "1", "Robotics", "Park", "robots",
            "3",
            "2", "Chess",
            "2", "Chess",
            "0", "0",
        ])
        assert "Club 'Robotics' added." in text
        assert "Robotics" in text
        assert "Club 'Chess' removed." in text
        assert "Club 'Chess' does not exist." in text
        assert service.get_club("Chess") is None
        assert "Robotics,Park,robots" in clubs_file.read_text(encoding="utf-8")

    def test_add_with_empty_field_does_nothing(self, service):
        run_console(service, ["1", "admin", "admin123", "1", "Robotics", "", "robots", "0", "0"])
        assert service.get_club("Robotics") is None


class TestStudentMenu:
    def test_apply(self, service):
        text = run_console(service, [
            "2", "student1", "pass1",
            "2", "Chess", "alice", "I like chess",
            "2", "Nope", "alice", "hi",
            "0", "0",
        ])
        assert "Application to 'Chess' submitted." in text
        assert "Club 'Nope' does not exist." in text
        assert service.pending_applications("Chess") == [Member("alice", "I like chess")]


class TestPresidentMenu:
    def test_view_and_approve(self, service):
        service.submit_application("Chess", "alice", "x")
        service.submit_application("Chess", "bob", "y")
        text = run_console(service, [
            "3", "president1", "pres123",
            "Chess",
            "1",
            "2", "bob",
            "2", "carol",
            "0", "0",
        ])
        assert "- alice: x" in text
        assert "Approved bob." in text
        assert "No pending application from 'carol'." in text
        assert service.pending_applications("Chess") == [Member("alice", "x")]

    def test_unknown_club(self, service):
        text = run_console(service, ["3", "president1", "pres123", "Nope", "0"])
        assert "Club 'Nope' does not exist." in text


class TestParser:
    def test_defaults(self):
        args = manage_clubs.build_parser().parse_args([])
        assert args.clubs_file is None
        assert args.users_file is None
        assert args.verbose is False

    def test_main_uses_given_files(self, clubs_file, users_file, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "0")
        manage_clubs.main(["--clubs-file", str(clubs_file), "--users-file", str(users_file)])
