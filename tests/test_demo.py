import re

from easyterminal.demo import build_demo_tasks, main
from easyterminal.tasklist import DisplayMode, TaskStatus

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _plain(text):
    return _ANSI.sub("", text)


def test_build_demo_tasks_states():
    task_list = build_demo_tasks()
    tasks = task_list.tasks()
    assert [t.name for t in tasks] == [
        "Initialize project",
        "Install dependencies",
        "Compile source code",
        "Run tests",
        "Package application",
    ]
    assert [t.status for t in tasks] == [
        TaskStatus.SUCCESS,
        TaskStatus.ACTIVE,
        TaskStatus.PENDING,
        TaskStatus.FAILED,
        TaskStatus.PENDING,
    ]
    assert tasks[1].display_mode is DisplayMode.PROGRESS
    assert tasks[1].progress == 65
    assert tasks[3].message == "Test suite failed: 3 failures"


def test_build_demo_tasks_view_has_title():
    view = _plain(build_demo_tasks().view())
    assert view.splitlines()[0] == "Build Process"
    assert "✓ Initialize project Project initialized successfully" in view


def test_main_prints_all_phases(capsys):
    assert main(["--delay", "0", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Initial state:\n")
    assert "\nAfter some progress:\n" in out
    assert "\nWith truncation (smaller width):\n" in out
    assert "All dependencies installed" in out
    assert "\x1b[" not in out


def test_main_truncates_last_task(capsys):
    main(["--delay", "0", "--no-color"])
    out = capsys.readouterr().out
    last_line = out.rstrip("\n").split("\n")[-1]
    assert last_line.startswith("● This is a very long task")
    assert last_line.endswith("...")
    assert "message" not in last_line