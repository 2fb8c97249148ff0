"""Non-interactive demonstration that prints a task list in several states."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from easyterminal.tasklist import TaskList, TaskStatus

DEMO_TITLE = "Build Process"
DEMO_WIDTH = 80


def _populate(task_list: TaskList) -> TaskList:
    init = task_list.add_task("Initialize project")
    deps = task_list.add_task("Install dependencies")
    compile_ = task_list.add_task("Compile source code")
    tests = task_list.add_task("Run tests")
    package = task_list.add_task("Package application")

    init.update_status(TaskStatus.SUCCESS)
    init.set_message("Project initialized successfully")

    deps.update_status(TaskStatus.ACTIVE)
    deps.set_progress_mode()
    deps.update_progress(65, 100)

    compile_.update_status(TaskStatus.PENDING)

    tests.update_status(TaskStatus.FAILED)
    tests.set_message("Test suite failed: 3 failures")

    package.update_status(TaskStatus.PENDING)
    return task_list


def _build(styled: bool) -> TaskList:
    return _populate(TaskList(DEMO_TITLE, DEMO_WIDTH, styled=styled))


def build_demo_tasks() -> TaskList:
    """Create the sample build-process task list in its initial state."""
    return _build(True)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a sample task list.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="seconds to wait between progress steps",
    )
    parser.add_argument("--no-color", action="store_true", help="disable styling")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    styled = not args.no_color and sys.stdout.isatty()
    task_list = _build(styled)
    _, deps, compile_, _, _ = task_list.tasks()

    print("Initial state:")
    print(task_list.view(), end="")

    print("\nAfter some progress:")
    for step in range(10):
        deps.update_progress(65 + step * 3, 100)
        time.sleep(args.delay)

    deps.update_status(TaskStatus.SUCCESS)
    deps.set_message("All dependencies installed")

    compile_.update_status(TaskStatus.ACTIVE)
    compile_.set_progress_mode()
    compile_.update_progress(50, 100)

    print(task_list.view(), end="")

    print("\nWith truncation (smaller width):")
    task_list.max_width = 40
    long_task = task_list.add_task("This is a very long task name that should be truncated")
    long_task.set_message("This is also a very long message that should be truncated")

    print(task_list.view(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())