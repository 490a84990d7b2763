#!/usr/bin/env python3
"""
Vikunja command line client.

A thin CLI over vikunja_sdk for day-to-day task work.

Environment Variables:
    VIKUNJA_API_URL: API base URL (default http://localhost:3456/api/v1)
    VIKUNJA_API_TOKEN: API token or JWT (required for everything but
                       `info` and `login`)

Usage:
    python3 vikunja_client.py info
    python3 vikunja_client.py login <username> <password>
    python3 vikunja_client.py projects
    python3 vikunja_client.py tasks --project <id> --undone
    python3 vikunja_client.py task <id>
    python3 vikunja_client.py create "Task title" --project <id>
    python3 vikunja_client.py done <id>
    python3 vikunja_client.py comment <id> "Comment text"
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from vikunja_sdk import FILTER_COMPARATORS, VikunjaClient, VikunjaError

# Configure logging
logger = logging.getLogger(__name__)

# Vikunja's zero value for unset dates
NULL_DATE_PREFIX = "0001-01-01"


# ========== Formatting ==========

def format_date(value: Optional[str]) -> str:
    """Shorten an API timestamp to YYYY-MM-DD, '-' when unset."""
    if not value or value.startswith(NULL_DATE_PREFIX):
        return "-"
    return value[:10]


def format_count(count: int, limit: int, label: str = "tasks") -> str:
    """Format result count with limit-reached indicator."""
    if count >= limit:
        return f"\n({count} {label}, limit reached - use -l to show more)"
    return f"\n({count} {label})"


def format_task(task: dict, verbose: bool = False) -> str:
    """Format task for display."""
    status = "✓" if task.get("done") else " "
    due = format_date(task.get("due_date"))
    title = task.get("title", "Untitled")
    assignees = ", ".join(a.get("username", "?") for a in task.get("assignees") or []) or "-"

    line = f"[{status}] {due:<12} {assignees:<15} {title}"

    if verbose:
        line = f"{task.get('id', ''):<8} {line}"

    return line


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


# ========== Commands ==========

def cmd_info(client: VikunjaClient, args):
    """Show server information."""
    info = client.system.get_info()
    if args.json:
        print_json(info)
        return

    print(f"Version: {info.get('version', 'unknown')}")
    print(f"Frontend: {info.get('frontend_url') or '-'}")
    print(f"Registration: {'enabled' if info.get('registration_enabled') else 'disabled'}")
    print(f"Attachments: {'enabled' if info.get('task_attachments_enabled') else 'disabled'}")
    if info.get("motd"):
        print(f"\n{info['motd']}")


def cmd_login(client: VikunjaClient, args):
    """Log in and print the token."""
    result = client.login(args.username, args.password, totp_passcode=args.totp)
    if args.json:
        print_json(result)
        return

    print(f"Logged in as {args.username}")
    print(f"Token: {result.get('token')}")
    print("\nUse it with: export VIKUNJA_API_TOKEN=<token>")


def cmd_projects(client: VikunjaClient, args):
    """List projects."""
    params: Dict[str, Any] = {"per_page": args.limit}
    if args.archived:
        params["is_archived"] = True
    projects = client.projects.get_projects(params)
    if args.json:
        print_json(projects)
        return

    if args.verbose:
        print(f"{'ID':<8} {'Parent':<8} {'Project'}")
        print("-" * 50)
        for p in projects:
            parent = p.get("parent_project_id") or "-"
            print(f"{p['id']:<8} {parent:<8} {p.get('title', '')}")
    else:
        for p in projects:
            print(p.get("title", ""))


def cmd_project(client: VikunjaClient, args):
    """Get project details."""
    project = client.projects.get_project(args.project_id)
    if args.json:
        print_json(project)
        return

    print(f"Project: {project.get('title')}")
    print(f"ID: {project.get('id')}")
    print(f"Archived: {'Yes' if project.get('is_archived') else 'No'}")
    owner = (project.get("owner") or {}).get("username")
    if owner:
        print(f"Owner: {owner}")
    if project.get("description"):
        print(f"\nDescription:\n{project['description']}")


def build_task_params(args) -> Dict[str, Any]:
    """Translate `tasks` options into list query parameters."""
    params: Dict[str, Any] = {"per_page": args.limit}
    if args.search:
        params["s"] = args.search

    filter_by: List[str] = []
    filter_value: List[str] = []
    if args.undone:
        filter_by.append("done")
        filter_value.append("false")
    if args.priority is not None:
        filter_by.append("priority")
        filter_value.append(str(args.priority))

    if filter_by:
        params["filter_by"] = filter_by
        params["filter_value"] = filter_value
        params["filter_comparator"] = args.comparator
    return params


def cmd_tasks(client: VikunjaClient, args):
    """List tasks, across all projects or in one project."""
    params = build_task_params(args)
    if args.project:
        tasks = client.tasks.get_project_tasks(args.project, params)
    else:
        tasks = client.tasks.get_all_tasks(params)

    if args.json:
        print_json(tasks)
        return

    for task in tasks:
        print(format_task(task, verbose=args.verbose))
    print(format_count(len(tasks), args.limit))


def cmd_task(client: VikunjaClient, args):
    """Get task details."""
    task = client.tasks.get_task(args.task_id)
    if args.json:
        print_json(task)
        return

    print(f"Task: {task.get('title')}")
    print(f"ID: {args.task_id}")
    print(f"Project: {task.get('project_id')}")
    print(f"Done: {'Yes' if task.get('done') else 'No'}")
    print(f"Due: {format_date(task.get('due_date'))}")
    print(f"Priority: {task.get('priority') or 0}")

    assignees = task.get("assignees") or []
    if assignees:
        print(f"Assignees: {', '.join(a.get('username', '?') for a in assignees)}")

    labels = task.get("labels") or []
    if labels:
        print(f"Labels: {', '.join(label.get('title', '') for label in labels)}")

    if task.get("description"):
        print(f"\nDescription:\n{task['description']}")


def cmd_create(client: VikunjaClient, args):
    """Create task."""
    task: Dict[str, Any] = {"title": args.title}
    if args.description:
        task["description"] = args.description
    if args.due:
        task["due_date"] = f"{args.due}T00:00:00Z" if len(args.due) == 10 else args.due
    if args.priority is not None:
        task["priority"] = args.priority

    created = client.tasks.create_task(args.project, task)
    if args.json:
        print_json(created)
        return

    print(f"Created: {created.get('title')}")
    print(f"ID: {created.get('id')}")


def cmd_done(client: VikunjaClient, args):
    """Mark task done."""
    task = client.tasks.mark_task_done(args.task_id)
    if args.json:
        print_json(task)
        return
    print(f"Done: {task.get('title', args.task_id)}")


def cmd_undone(client: VikunjaClient, args):
    """Mark task not done."""
    task = client.tasks.mark_task_undone(args.task_id)
    if args.json:
        print_json(task)
        return
    print(f"Reopened: {task.get('title', args.task_id)}")


def cmd_comment(client: VikunjaClient, args):
    """Add comment."""
    comment = client.tasks.create_task_comment(args.task_id, {"comment": args.text})
    if args.json:
        print_json(comment)
        return

    print(f"Added comment to task {args.task_id}")


def cmd_labels(client: VikunjaClient, args):
    """List labels."""
    labels = client.labels.get_labels({"s": args.search} if args.search else None)
    if args.json:
        print_json(labels)
        return

    for label in labels:
        if args.verbose:
            print(f"{label.get('id', ''):<8} #{label.get('hex_color') or '------':<7} {label.get('title', '')}")
        else:
            print(label.get("title", ""))


def cmd_teams(client: VikunjaClient, args):
    """List teams."""
    teams = client.teams.get_teams()
    if args.json:
        print_json(teams)
        return

    for team in teams:
        members = len(team.get("members") or [])
        line = f"{team.get('name', '')} ({members} members)"
        if args.verbose:
            line = f"{team.get('id', ''):<8} {line}"
        print(line)


def cmd_notifications(client: VikunjaClient, args):
    """List notifications, or mark them all read."""
    if args.mark_read:
        client.notifications.mark_all_as_read()
        print("Marked all notifications as read")
        return

    notifications = client.notifications.get_notifications()
    if args.json:
        print_json(notifications)
        return

    for n in notifications:
        status = " " if n.get("read_at") else "*"
        created = format_date(n.get("created"))
        print(f"[{status}] {created:<12} {n.get('name', '')}")


def main():
    epilog = """\
Examples:
  vikunja info                    Show server version and features
  vikunja login alice secret      Get a token
  vikunja projects                List projects
  vikunja tasks -u                Undone tasks across all projects
  vikunja tasks -p 3 -P 3         Tasks in project 3 with priority 3
  vikunja task 42                 Task details
  vikunja create "Title" -p 3     Create task in project 3
  vikunja done 42                 Mark task done
  vikunja comment 42 "text"       Add comment to task

Environment:
  VIKUNJA_API_URL      API base URL (default http://localhost:3456/api/v1)
  VIKUNJA_API_TOKEN    API token or JWT.
"""

    parser = argparse.ArgumentParser(
        prog="vikunja",
        description="Vikunja CLI - REST API client",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show IDs in output and log requests")

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    # info
    info = subparsers.add_parser("info", help="Show server information")
    info.set_defaults(func=cmd_info)

    # login
    login = subparsers.add_parser("login", help="Log in and print a token")
    login.add_argument("username")
    login.add_argument("password")
    login.add_argument("--totp", help="TOTP passcode if two-factor auth is enabled")
    login.set_defaults(func=cmd_login)

    # projects
    proj = subparsers.add_parser("projects", help="List projects")
    proj.add_argument("--archived", action="store_true", help="Include archived projects")
    proj.add_argument("-l", "--limit", type=int, default=50)
    proj.set_defaults(func=cmd_projects)

    # project
    project = subparsers.add_parser("project", help="Get project details")
    project.add_argument("project_id", type=int, help="Project ID")
    project.set_defaults(func=cmd_project)

    # tasks
    tasks = subparsers.add_parser("tasks", help="List tasks")
    tasks.add_argument("-p", "--project", type=int, help="Project ID")
    tasks.add_argument("-s", "--search", help="Search text")
    tasks.add_argument("-u", "--undone", action="store_true", help="Only undone tasks")
    tasks.add_argument("-P", "--priority", type=int, help="Filter by priority")
    tasks.add_argument("-c", "--comparator", choices=FILTER_COMPARATORS, default="equals",
                       help="Comparator for filters (default: equals)")
    tasks.add_argument("-l", "--limit", type=int, default=50)
    tasks.set_defaults(func=cmd_tasks)

    # task
    task = subparsers.add_parser("task", help="Get task details")
    task.add_argument("task_id", type=int, help="Task ID")
    task.set_defaults(func=cmd_task)

    # create
    create = subparsers.add_parser("create", help="Create task")
    create.add_argument("title", help="Task title")
    create.add_argument("-p", "--project", type=int, required=True, help="Project ID")
    create.add_argument("-d", "--due", help="Due date (YYYY-MM-DD or RFC 3339)")
    create.add_argument("-n", "--description", help="Description")
    create.add_argument("-P", "--priority", type=int, help="Priority (0-5)")
    create.set_defaults(func=cmd_create)

    # done / undone
    done = subparsers.add_parser("done", help="Mark task done")
    done.add_argument("task_id", type=int, help="Task ID")
    done.set_defaults(func=cmd_done)

    undone = subparsers.add_parser("undone", help="Mark task not done")
    undone.add_argument("task_id", type=int, help="Task ID")
    undone.set_defaults(func=cmd_undone)

    # comment
    comment = subparsers.add_parser("comment", help="Add comment")
    comment.add_argument("task_id", type=int, help="Task ID")
    comment.add_argument("text", help="Comment text")
    comment.set_defaults(func=cmd_comment)

    # labels
    labels = subparsers.add_parser("labels", help="List labels")
    labels.add_argument("-s", "--search", help="Search text")
    labels.set_defaults(func=cmd_labels)

    # teams
    teams = subparsers.add_parser("teams", help="List teams")
    teams.set_defaults(func=cmd_teams)

    # notifications
    notifications = subparsers.add_parser("notifications", help="List notifications")
    notifications.add_argument("--mark-read", action="store_true", help="Mark all as read")
    notifications.set_defaults(func=cmd_notifications)

    # help
    help_parser = subparsers.add_parser("help", help="Show help for a command")
    help_parser.add_argument("help_command", nargs="?", help="Command to get help for")

    # Normalize argv: move --json and -v to before the subcommand so they
    # work in any position (e.g. "vikunja tasks -u --json" works like
    # "vikunja --json tasks -u")
    raw_args = sys.argv[1:]
    global_flags = {"--json", "-v", "--verbose"}
    hoisted = [a for a in raw_args if a in global_flags]
    rest = [a for a in raw_args if a not in global_flags]
    args = parser.parse_args(hoisted + rest)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Show help if no command
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    # Handle 'help <command>' by delegating to that command's -h
    if args.command == "help":
        if args.help_command and args.help_command in subparsers.choices:
            subparsers.choices[args.help_command].print_help()
        else:
            parser.print_help()
        sys.exit(0)

    try:
        client = VikunjaClient.from_env()
        args.func(client, args)
    except VikunjaError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
