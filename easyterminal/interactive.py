"""Full-screen interactive demonstration of the task list."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from easyterminal.demo import build_demo_tasks
from easyterminal.tasklist import DisplayMode, TaskList, TaskStatus

TICK_INTERVAL = 0.1

HEADER = (
    "Task List Component Demo\n"
    "Press '1' to toggle task 2, '2' to start task 3, "
    "'3' to advance task 3, 'q' to quit\n\n"
)


class DemoModel:
    """State of the interactive demo: a task list plus the screen size."""

    def __init__(
        self,
        task_list: Optional[TaskList] = None,
        width: int = 80,
        height: int = 20,
    ) -> None:
        self.task_list = task_list if task_list is not None else build_demo_tasks()
        self.width = width
        self.height = height
        tasks = self.task_list.tasks()
        self.task2_id = tasks[1].id
        self.task3_id = tasks[2].id

    def handle_key(self, key: str) -> bool:
        """React to a key press; return False when the demo should quit."""
        if key in ("q", "ctrl+c"):
            return False
        if key == "1":
            task2 = self.task_list.get_task(self.task2_id)
            if task2 is not None:
                if task2.status is TaskStatus.ACTIVE:
                    task2.update_status(TaskStatus.SUCCESS)
                    task2.set_message("All dependencies installed")
                else:
                    task2.update_status(TaskStatus.ACTIVE)
                    task2.set_progress_mode()
                    task2.update_progress(65, 100)
        elif key == "2":
            task3 = self.task_list.get_task(self.task3_id)
            if task3 is not None:
                task3.update_status(TaskStatus.ACTIVE)
                task3.set_message("Compiling...")
        elif key == "3":
            task3 = self.task_list.get_task(self.task3_id)
            if task3 is not None and task3.status is TaskStatus.ACTIVE:
                task3.set_progress_mode()
                task3.update_progress(task3.progress + 10, 100)
                if task3.progress >= 100:
                    task3.update_status(TaskStatus.SUCCESS)
                    task3.set_message("Compilation complete")
        return True

    def tick(self) -> None:
        """Advance every active task shown as progress by one step."""
        for task in self.task_list.tasks():
            if (
                task.status is TaskStatus.ACTIVE
                and task.display_mode is DisplayMode.PROGRESS
                and task.progress < task.total
            ):
                task.update_progress(task.progress + 1, task.total)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.task_list.max_width = width - 4

    def view(self) -> str:
        return HEADER + self.task_list.view()


def _key_name(key) -> str:
    text = str(key)
    if text == "\x03":
        return "ctrl+c"
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(description="Interactive task list demo.").parse_args(argv)

    import blessed

    term = blessed.Terminal()
    model = DemoModel()
    model.resize(term.width, term.height)
    next_tick = time.monotonic() + TICK_INTERVAL
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            while True:
                if (term.width, term.height) != (model.width, model.height):
                    model.resize(term.width, term.height)
                print(term.home + term.clear + model.view(), end="", flush=True)
                key = term.inkey(timeout=max(0.0, next_tick - time.monotonic()))
                if key and not model.handle_key(_key_name(key)):
                    break
                now = time.monotonic()
                if now >= next_tick:
                    model.tick()
                    next_tick = now + TICK_INTERVAL
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())