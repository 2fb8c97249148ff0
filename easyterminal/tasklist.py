"""A thread-safe list of tasks rendered as a compact status view."""

from __future__ import annotations

import threading
import time
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
SPINNER_INTERVAL = 0.1

_NAME_PADDING = 4
_MIN_NAME_WIDTH = 10
_PROGRESS_MIN_WIDTH = 10
_MESSAGE_PADDING = 6


class TaskStatus(IntEnum):
    """Lifecycle state of a task."""

    PENDING = 0
    ACTIVE = 1
    SUCCESS = 2
    FAILED = 3


class DisplayMode(IntEnum):
    """What a task shows after its name."""

    TEXT = 0
    PROGRESS = 1


def _sgr_color(color: int) -> str:
    if 0 <= color <= 7:
        return str(30 + color)
    if 8 <= color <= 15:
        return str(90 + color - 8)
    return f"38;5;{color}"


@dataclass(frozen=True)
class Style:
    """Terminal text style: foreground colour, bold and a bottom margin."""

    color: Optional[int] = None
    bold: bool = False
    margin_bottom: int = 0
    enabled: bool = True

    def render(self, text: str) -> str:
        """Return ``text`` decorated with this style."""
        codes = []
        if self.enabled:
            if self.bold:
                codes.append("1")
            if self.color is not None:
                codes.append(_sgr_color(self.color))
        lines = text.split("\n")
        if codes:
            prefix = "\x1b[" + ";".join(codes) + "m"
            lines = [f"{prefix}{line}\x1b[0m" for line in lines]
        width = max((len(line) for line in text.split("\n")), default=0)
        lines.extend(" " * width for _ in range(self.margin_bottom))
        return "\n".join(lines)


@dataclass
class Task:
    """A single named task with a status, a message and progress counters."""

    name: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: TaskStatus = TaskStatus.PENDING
    message: str = ""
    display_mode: DisplayMode = DisplayMode.TEXT
    progress: int = 0
    total: int = 100
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def update_status(self, status: TaskStatus) -> None:
        with self._lock:
            self.status = status

    def update_progress(self, current: int, total: int) -> None:
        """Set the progress counters and switch to progress display."""
        with self._lock:
            self.progress = current
            self.total = total
            self.display_mode = DisplayMode.PROGRESS

    def set_message(self, message: str) -> None:
        """Set the message and switch to text display."""
        with self._lock:
            self.message = message
            self.display_mode = DisplayMode.TEXT

    def set_progress_mode(self) -> None:
        with self._lock:
            self.display_mode = DisplayMode.PROGRESS

    def set_text_mode(self) -> None:
        with self._lock:
            self.display_mode = DisplayMode.TEXT


def truncate_text(text: str, max_len: int) -> str:
    """Cut ``text`` to ``max_len`` characters, ending with an ellipsis if room allows."""
    if max_len < 0:
        raise ValueError("max_len must not be negative")
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


def render_progress_bar(current: int, total: int, width: int) -> str:
    """Render a block-character bar of ``width`` cells followed by a percentage."""
    if width <= 0:
        return ""
    if total == 0:
        return "░" * width + " 0%"
    percentage = min(current / total, 1.0)
    filled = int(percentage * width)
    if filled < 0:
        raise ValueError("progress must not be negative")
    empty = width - filled
    return "█" * filled + "░" * empty + f" {int(percentage * 100)}%"


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class TaskList:
    """An ordered, thread-safe collection of tasks with a text view."""

    def __init__(
        self,
        title: str,
        max_width: int,
        *,
        styled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.title = title
        self._max_width = max_width
        self._tasks: list[Task] = []
        self._lock = threading.RLock()
        self._clock = clock
        self._spinner_pos = 0
        self._last_spin: Optional[float] = None
        self.title_style = Style(color=12, bold=True, margin_bottom=1, enabled=styled)
        self.task_style = Style(color=15, enabled=styled)
        self.success_style = Style(color=10, enabled=styled)
        self.error_style = Style(color=9, enabled=styled)
        self.warning_style = Style(color=11, enabled=styled)
        self.dim_style = Style(color=8, enabled=styled)

    @property
    def max_width(self) -> int:
        with self._lock:
            return self._max_width

    @max_width.setter
    def max_width(self, width: int) -> None:
        with self._lock:
            self._max_width = width

    def add_task(self, name: str) -> Task:
        """Append a new pending task and return it."""
        task = Task(name=name)
        with self._lock:
            self._tasks.append(task)
        return task

    def tasks(self) -> list[Task]:
        """Return a snapshot of the tasks in insertion order."""
        with self._lock:
            return list(self._tasks)

    def get_task(self, task_id: str) -> Optional[Task]:
        """Return the task with ``task_id``, or None if there is none."""
        with self._lock:
            return next((task for task in self._tasks if task.id == task_id), None)

    def _spinner(self) -> str:
        now = self._clock()
        if self._last_spin is None or now - self._last_spin > SPINNER_INTERVAL:
            self._spinner_pos = (self._spinner_pos + 1) % len(SPINNER_FRAMES)
            self._last_spin = now
        return SPINNER_FRAMES[self._spinner_pos]

    def _status_icon(self, status: TaskStatus) -> tuple[str, Style]:
        if status is TaskStatus.ACTIVE:
            return self._spinner(), self.warning_style
        if status is TaskStatus.SUCCESS:
            return "✓", self.success_style
        if status is TaskStatus.FAILED:
            return "✗", self.error_style
        return "●", self.dim_style

    def _message_style(self, status: TaskStatus) -> Style:
        if status is TaskStatus.SUCCESS:
            return self.success_style
        if status is TaskStatus.FAILED:
            return self.error_style
        return self.dim_style

    def _render_task(self, task: Task, max_width: int) -> str:
        with task._lock:
            icon, icon_style = self._status_icon(task.status)
            icon_str = icon_style.render(icon)
            name_width = max(max_width - _NAME_PADDING, _MIN_NAME_WIDTH)
            name = truncate_text(task.name, name_width)
            line = f"{icon_str} {name}"

            if task.display_mode is DisplayMode.PROGRESS:
                progress_width = max_width - _byte_len(name) - _PROGRESS_MIN_WIDTH
                if progress_width > 0:
                    bar = render_progress_bar(task.progress, task.total, progress_width)
                    line = f"{icon_str} {name} {self.dim_style.render(bar)}"
            elif task.message:
                message_width = max_width - _byte_len(name) - _MESSAGE_PADDING
                if message_width > 0:
                    message = truncate_text(task.message, message_width)
                    styled = self._message_style(task.status).render(message)
                    line = f"{icon_str} {name} {styled}"
            return line

    def view(self) -> str:
        """Render the title and one line per task."""
        with self._lock:
            tasks = list(self._tasks)
            max_width = self._max_width
        parts = []
        if self.title:
            parts.append(self.title_style.render(self.title) + "\n")
        parts.extend(self._render_task(task, max_width) + "\n" for task in tasks)
        return "".join(parts)