"""Tests for the clicky command line."""

import json
from pathlib import Path

import pytest

from clicky.__main__ import main


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "myproject"
    root.mkdir()
    assert main(["--path", str(root), "init"]) == 0
    return root


def run(project: Path, *args: str) -> int:
    return main(["--path", str(project), *args])


def board_json(project: Path) -> dict:
    return json.loads((project / ".clicky" / "board.json").read_text())


def feed_input(monkeypatch: pytest.MonkeyPatch, *lines: str) -> None:
    """Answer input() prompts with the given lines in order."""
    answers = iter(lines)
    monkeypatch.setattr("builtins.input", lambda *_: next(answers))


class TestInit:
    """Tests for the init command."""

    def test_init_reports_board(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        assert main(["--path", str(tmp_path), "init", "--name", "My Project"]) == 0

        out = capsys.readouterr().out
        assert "Initialized board 'My Project'" in out
        assert "MYP" in out
        assert "To Do, In Progress, Done" in out
        assert board_json(tmp_path)["id"] == "my-project"

    def test_init_twice_fails(self, project: Path, capsys: pytest.CaptureFixture):
        capsys.readouterr()
        assert run(project, "init") == 1
        assert "already initialized" in capsys.readouterr().err

    def test_interactive_init(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        feed_input(monkeypatch, "Side Quest")
        assert main(["--path", str(tmp_path), "init", "-i"]) == 0
        assert board_json(tmp_path)["card_id_prefix"] == "SID"


class TestCardCommands:
    """Tests for card commands."""

    def test_create_and_show(self, project: Path, capsys: pytest.CaptureFixture):
        assert run(project, "create", "Write docs", "-d", "All of them", "-a", "alice") == 0
        assert "Created card MYP-001" in capsys.readouterr().out

        assert run(project, "show", "MYP-001") == 0
        out = capsys.readouterr().out
        assert "Card: MYP-001" in out
        assert "Write docs" in out
        assert "All of them" in out
        assert "To Do (todo)" in out
        assert "alice" in out

    def test_create_unknown_column(self, project: Path, capsys: pytest.CaptureFixture):
        assert run(project, "create", "Lost", "--column", "nowhere") == 1
        assert "Column not found: nowhere" in capsys.readouterr().err
        assert board_json(project)["next_card_number"] == 1

    def test_create_without_title_is_usage_error(self, project: Path):
        with pytest.raises(SystemExit) as exc:
            run(project, "create")
        assert exc.value.code == 2

    def test_move(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "Travel")
        assert run(project, "move", "MYP-001", "done") == 0
        assert "Moved MYP-001 to Done" in capsys.readouterr().out
        assert board_json(project)["cards"][0]["column_id"] == "done"

    def test_move_unknown_card(self, project: Path, capsys: pytest.CaptureFixture):
        assert run(project, "move", "MYP-404", "done") == 1
        assert "Card not found: MYP-404" in capsys.readouterr().err

    def test_list_groups_by_column(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "A", "-a", "alice")
        run(project, "create", "B", "-c", "done")
        capsys.readouterr()

        assert run(project, "list") == 0
        out = capsys.readouterr().out
        assert "Total cards: 2" in out
        assert "MYP-001: A [@alice]" in out
        assert "(no cards)" in out
        assert out.index("To Do") < out.index("MYP-001") < out.index("Done") < out.index("MYP-002")

    def test_list_filters(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "A", "-a", "alice")
        run(project, "create", "B", "-a", "bob")
        capsys.readouterr()

        assert run(project, "list", "--assignee", "bob", "--column", "todo") == 0
        out = capsys.readouterr().out
        assert "MYP-002: B" in out
        assert "MYP-001" not in out
        assert "Done (done)" not in out

    def test_update_and_clear(self, project: Path):
        run(project, "create", "A", "-d", "desc", "-a", "alice")

        assert run(project, "update", "MYP-001", "--title", "A2", "--clear-description") == 0
        card = board_json(project)["cards"][0]
        assert card["title"] == "A2"
        assert card["description"] is None
        assert card["assignee"] == "alice"

        assert run(project, "update", "MYP-001", "--clear-assignee") == 0
        assert board_json(project)["cards"][0]["assignee"] is None

    def test_update_empty_title(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "A")
        assert run(project, "update", "MYP-001", "--title", "  ") == 1
        assert "Title is required" in capsys.readouterr().err

    def test_delete_force(self, project: Path):
        run(project, "create", "A")
        assert run(project, "delete", "MYP-001", "--force") == 0
        assert board_json(project)["cards"] == []

    def test_delete_confirm(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        run(project, "create", "A")
        feed_input(monkeypatch, "Y")
        assert run(project, "delete", "MYP-001") == 0
        assert board_json(project)["cards"] == []

    def test_delete_cancelled(
        self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        run(project, "create", "A")
        feed_input(monkeypatch, "yes please")
        assert run(project, "delete", "MYP-001") == 0
        assert "Cancelled" in capsys.readouterr().out
        assert len(board_json(project)["cards"]) == 1

    def test_reorder(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "A")
        run(project, "create", "B")

        assert run(project, "reorder", "MYP-002", "up") == 0
        assert board_json(project)["columns"][0]["cards"] == ["MYP-002", "MYP-001"]

        capsys.readouterr()
        assert run(project, "reorder", "MYP-002", "up") == 1
        assert "already at the top" in capsys.readouterr().err


class TestBoardCommands:
    """Tests for info and column commands."""

    def test_info(self, project: Path, capsys: pytest.CaptureFixture):
        run(project, "create", "A")
        capsys.readouterr()

        assert run(project, "info") == 0
        out = capsys.readouterr().out
        assert "Board: myproject" in out
        assert "To Do (todo): 1 cards" in out
        assert "Total cards: 1" in out

    def test_info_finds_parent_board(self, project: Path, capsys: pytest.CaptureFixture):
        nested = project / "sub"
        nested.mkdir()
        capsys.readouterr()

        assert run(nested, "info") == 0
        assert "Board found in parent directory" in capsys.readouterr().out

    def test_info_no_board(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        assert main(["--path", str(tmp_path), "info"]) == 1
        assert "No board found" in capsys.readouterr().err

    def test_column_add_and_remove(self, project: Path):
        run(project, "create", "A", "-c", "in_progress")

        assert run(project, "column", "add", "review", "Review", "--order", "1") == 0
        assert [c["id"] for c in board_json(project)["columns"]] == [
            "todo",
            "in_progress",
            "review",
            "done",
        ]

        assert run(project, "column", "remove", "in_progress") == 0
        data = board_json(project)
        assert [c["id"] for c in data["columns"]] == ["todo", "review", "done"]
        assert data["cards"][0]["column_id"] == "todo"

    def test_undecodable_board_file(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        board_dir = tmp_path / ".clicky"
        board_dir.mkdir()
        (board_dir / "board.json").write_bytes(b'{"id": "\xff\xfe"}')

        assert main(["--path", str(tmp_path), "list"]) == 1
        assert "Cannot read board file" in capsys.readouterr().err

    def test_commands_without_board(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        assert main(["--path", str(tmp_path), "list"]) == 1
        assert "clicky init" in capsys.readouterr().err


class TestInteractive:
    """Tests for the prompt wizards."""

    def test_create_wizard(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        # Empty title is re-asked, then column 2 (In Progress) is chosen
        feed_input(monkeypatch, "", "Wizard card", "", "carol", "9", "2")
        assert run(project, "create", "-i") == 0

        card = board_json(project)["cards"][0]
        assert card["title"] == "Wizard card"
        assert card["description"] is None
        assert card["assignee"] == "carol"
        assert card["column_id"] == "in_progress"

    def test_move_wizard_excludes_current_column(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        run(project, "create", "A")
        # Card 1, then column 2 of [In Progress, Done]
        feed_input(monkeypatch, "1", "2")
        assert run(project, "move", "-i") == 0
        assert board_json(project)["cards"][0]["column_id"] == "done"

    def test_update_wizard(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        run(project, "create", "A", "-d", "old")
        feed_input(
            monkeypatch,
            "1",  # card
            "y",  # update title?
            "Renamed",
            "y",  # update description?
            "y",  # clear description?
            "y",  # update assignee?
            "dave",  # add assignee
        )
        assert run(project, "update", "-i") == 0

        card = board_json(project)["cards"][0]
        assert card["title"] == "Renamed"
        assert card["description"] is None
        assert card["assignee"] == "dave"

    def test_update_wizard_no_changes(
        self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        run(project, "create", "A")
        feed_input(monkeypatch, "1", "n", "n", "n")
        assert run(project, "update", "-i") == 0
        assert "No changes made" in capsys.readouterr().out

    def test_wizard_on_empty_board(
        self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        feed_input(monkeypatch)
        assert run(project, "delete", "-i") == 0
        assert "No cards found" in capsys.readouterr().out

    def test_eof_cancels(self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
        def raise_eof(*_):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        assert run(project, "create", "-i") == 1
        assert "Cancelled" in capsys.readouterr().err
