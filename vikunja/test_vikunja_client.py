#!/usr/bin/env python3
"""
Unit tests for vikunja_client.py (the command line client)

Tests cover:
- Task formatting helpers
- Command functions against a mocked session
- Argument parsing, global flag hoisting and exit codes
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from vikunja_sdk import VikunjaClient
from vikunja_client import (
    build_task_params,
    cmd_comment,
    cmd_create,
    cmd_done,
    cmd_info,
    cmd_labels,
    cmd_login,
    cmd_notifications,
    cmd_project,
    cmd_projects,
    cmd_task,
    cmd_tasks,
    cmd_teams,
    cmd_undone,
    format_count,
    format_date,
    format_task,
    main,
)

BASE_URL = "https://vikunja.example.com/api/v1"


def mock_response(json_data, status_code=200):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.headers = {}
    resp.content = b"{}"
    resp.json.return_value = json_data
    return resp


class TestFormatting:
    """Tests for output helpers."""

    def test_format_task_open(self):
        task = {"title": "Write report", "due_date": "2025-01-31T12:00:00Z", "done": False,
                "assignees": [{"username": "alice"}]}
        result = format_task(task)
        assert "[ ]" in result
        assert "Write report" in result
        assert "2025-01-31" in result
        assert "alice" in result

    def test_format_task_done(self):
        task = {"title": "Ship it", "due_date": "0001-01-01T00:00:00Z", "done": True, "assignees": None}
        result = format_task(task)
        assert "[✓]" in result
        assert "Ship it" in result

    def test_format_task_verbose(self):
        result = format_task({"id": 42, "title": "Task"}, verbose=True)
        assert result.startswith("42")

    def test_format_date(self):
        assert format_date("2025-03-04T10:00:00+01:00") == "2025-03-04"
        assert format_date("0001-01-01T00:00:00Z") == "-"
        assert format_date(None) == "-"

    def test_format_count(self):
        assert format_count(3, 50) == "\n(3 tasks)"
        assert "limit reached" in format_count(50, 50)


class TestCommands:
    """Tests for CLI command functions."""

    @pytest.fixture
    def client(self):
        session = MagicMock()
        return VikunjaClient(BASE_URL, token="test_token", session=session, timeout=5)

    @pytest.fixture
    def mock_args(self):
        """Create a mock args object."""
        args = Mock()
        args.json = False
        args.verbose = False
        return args

    def test_cmd_info(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response(
            {"version": "v0.22.1", "frontend_url": "https://tasks.example.com/",
             "registration_enabled": False, "task_attachments_enabled": True}
        )
        cmd_info(client, mock_args)
        out = capsys.readouterr().out
        assert "v0.22.1" in out
        assert "Registration: disabled" in out

    def test_cmd_login(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({"token": "jwt_abc"})
        mock_args.username = "alice"
        mock_args.password = "secret"
        mock_args.totp = None

        cmd_login(client, mock_args)

        out = capsys.readouterr().out
        assert "Logged in as alice" in out
        assert "jwt_abc" in out
        assert client.tasks.token == "jwt_abc"

    def test_cmd_projects(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response(
            [{"id": 1, "title": "Inbox"}, {"id": 2, "title": "Work"}]
        )
        mock_args.archived = False
        mock_args.limit = 50

        cmd_projects(client, mock_args)

        out = capsys.readouterr().out
        assert "Inbox" in out
        assert "Work" in out
        assert client.session.request.call_args[1]["params"] == {"per_page": "50"}

    def test_cmd_projects_json(self, client, mock_args, capsys):
        projects = [{"id": 1, "title": "Inbox"}]
        client.session.request.return_value = mock_response(projects)
        mock_args.json = True
        mock_args.archived = True
        mock_args.limit = 10

        cmd_projects(client, mock_args)

        assert json.loads(capsys.readouterr().out) == projects
        assert client.session.request.call_args[1]["params"]["is_archived"] == "true"

    def test_build_task_params(self, mock_args):
        mock_args.limit = 20
        mock_args.search = None
        mock_args.undone = True
        mock_args.priority = 3
        mock_args.comparator = "equals"

        params = build_task_params(mock_args)

        assert params == {
            "per_page": 20,
            "filter_by": ["done", "priority"],
            "filter_value": ["false", "3"],
            "filter_comparator": "equals",
        }

    def test_cmd_tasks_all(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response([{"id": 1, "title": "Open task"}])
        mock_args.project = None
        mock_args.limit = 50
        mock_args.search = None
        mock_args.undone = True
        mock_args.priority = None
        mock_args.comparator = "equals"

        cmd_tasks(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["url"] == f"{BASE_URL}/tasks/all"
        assert call["params"] == {"per_page": "50", "filter": "done equals false"}
        out = capsys.readouterr().out
        assert "Open task" in out
        assert "(1 tasks)" in out

    def test_cmd_tasks_project(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response([])
        mock_args.project = 7
        mock_args.limit = 50
        mock_args.search = "report"
        mock_args.undone = False
        mock_args.priority = None

        cmd_tasks(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["url"] == f"{BASE_URL}/projects/7/tasks"
        assert call["params"] == {"per_page": "50", "s": "report"}

    def test_cmd_task(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({
            "id": 42, "title": "Write report", "project_id": 3, "done": False,
            "priority": 2, "labels": [{"title": "work"}], "description": "Quarterly",
        })
        mock_args.task_id = 42

        cmd_task(client, mock_args)

        out = capsys.readouterr().out
        assert "Task: Write report" in out
        assert "Labels: work" in out
        assert "Quarterly" in out

    def test_cmd_create(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({"id": 43, "title": "New"})
        mock_args.title = "New"
        mock_args.project = 3
        mock_args.description = None
        mock_args.due = "2025-02-01"
        mock_args.priority = None

        cmd_create(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["method"] == "PUT"
        assert call["url"] == f"{BASE_URL}/projects/3/tasks"
        assert call["json"] == {"title": "New", "due_date": "2025-02-01T00:00:00Z"}
        assert "ID: 43" in capsys.readouterr().out

    def test_cmd_done(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({"id": 42, "title": "Write report", "done": True})
        mock_args.task_id = 42

        cmd_done(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["url"] == f"{BASE_URL}/tasks/42/done"
        assert "Done: Write report" in capsys.readouterr().out

    def test_cmd_undone(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({"id": 42, "title": "Write report", "done": False})
        mock_args.task_id = 42

        cmd_undone(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["method"] == "POST"
        assert call["url"] == f"{BASE_URL}/tasks/42/undone"
        assert "Reopened: Write report" in capsys.readouterr().out

    def test_cmd_project(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({
            "id": 5, "title": "Inbox", "is_archived": False,
            "owner": {"username": "alice"}, "description": "Everything else",
        })
        mock_args.project_id = 5

        cmd_project(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["url"] == f"{BASE_URL}/projects/5"
        out = capsys.readouterr().out
        assert "Project: Inbox" in out
        assert "Archived: No" in out
        assert "Owner: alice" in out
        assert "Everything else" in out

    def test_cmd_labels(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response(
            [{"id": 1, "title": "urgent", "hex_color": "e8e8e8"}, {"id": 2, "title": "later"}]
        )
        mock_args.search = "ur"

        cmd_labels(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["url"] == f"{BASE_URL}/labels"
        assert call["params"] == {"s": "ur"}
        out = capsys.readouterr().out
        assert "urgent" in out
        assert "later" in out

    def test_cmd_comment(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({"id": 1, "comment": "hi"})
        mock_args.task_id = 42
        mock_args.text = "hi"

        cmd_comment(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["json"] == {"comment": "hi"}
        assert "Added comment to task 42" in capsys.readouterr().out

    def test_cmd_teams(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response(
            [{"id": 1, "name": "Ops", "members": [{"username": "a"}, {"username": "b"}]}]
        )
        cmd_teams(client, mock_args)
        assert "Ops (2 members)" in capsys.readouterr().out

    def test_cmd_notifications_mark_read(self, client, mock_args, capsys):
        client.session.request.return_value = mock_response({})
        mock_args.mark_read = True

        cmd_notifications(client, mock_args)

        call = client.session.request.call_args[1]
        assert call["method"] == "POST"
        assert call["url"] == f"{BASE_URL}/notifications"


class TestMain:
    """Tests for argument handling in main()."""

    def run_main(self, argv, client=None):
        with patch.object(sys, "argv", ["vikunja"] + argv):
            with patch("vikunja_client.VikunjaClient.from_env", return_value=client):
                with pytest.raises(SystemExit) as exc_info:
                    main()
        return exc_info.value.code

    def make_client(self, response):
        session = MagicMock()
        session.request.return_value = response
        return VikunjaClient(BASE_URL, token="t", session=session, timeout=5)

    def test_no_command_prints_help(self, capsys):
        assert self.run_main([]) == 0
        assert "usage: vikunja" in capsys.readouterr().out

    def test_help_command(self, capsys):
        assert self.run_main(["help", "tasks"]) == 0
        assert "--undone" in capsys.readouterr().out

    def test_json_flag_after_command(self, capsys):
        """Should accept --json anywhere on the command line."""
        client = self.make_client(mock_response({"id": 5, "title": "Inbox"}))
        with patch.object(sys, "argv", ["vikunja", "project", "5", "--json"]):
            with patch("vikunja_client.VikunjaClient.from_env", return_value=client):
                main()
        assert json.loads(capsys.readouterr().out) == {"id": 5, "title": "Inbox"}

    def test_api_error_exits_1(self, capsys):
        client = self.make_client(
            mock_response({"message": "The task does not exist.", "code": 4002}, status_code=404)
        )
        assert self.run_main(["task", "999"], client) == 1
        assert "Error: The task does not exist." in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self):
        client = MagicMock()
        client.system.get_info.side_effect = KeyboardInterrupt
        assert self.run_main(["info"], client) == 130


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
