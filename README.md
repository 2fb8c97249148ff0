# easyterminal

A small terminal component that shows a titled list of tasks. Each task has
a status icon, and next to its name either a short message or a progress bar.

- pending tasks show a dim `●`
- active tasks show an animated braille spinner
- successful tasks show a green `✓`
- failed tasks show a red `✗`

Long task names and long messages are cut down to fit the width you set, and
end in `...`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the task list

```python
from easyterminal.tasklist import TaskList, TaskStatus

tasks = TaskList("Build Process", 80)

init = tasks.add_task("Initialize project")
deps = tasks.add_task("Install dependencies")

init.update_status(TaskStatus.SUCCESS)
init.set_message("Project initialized successfully")

deps.update_status(TaskStatus.ACTIVE)
deps.set_progress_mode()
deps.update_progress(65, 100)

print(tasks.view(), end="")
```

`TaskList.view()` returns the title followed by one line per task, each
ending in a newline. Colours are written as ANSI escape sequences; pass
`styled=False` to `TaskList` to get plain text. The spinner frame for active
tasks advances at most once every 0.1 seconds; a different time source can
be given with the `clock` keyword argument.

A task shows a progress bar once `update_progress` or `set_progress_mode`
has been called on it. Calling `set_message` or `set_text_mode` switches it
back to showing its message. `update_status` changes its `TaskStatus`
(`PENDING`, `ACTIVE`, `SUCCESS` or `FAILED`).

Every task gets a unique `id` when it is added. You can look it up again with
`TaskList.get_task(task_id)`, which returns `None` for an unknown id, and
`TaskList.tasks()` gives a snapshot of all tasks in the order they were added.
The width used for layout can be read or changed through the `max_width`
property. Tasks and the list may be updated from several threads.

The helpers `truncate_text` and `render_progress_bar` in
`easyterminal.tasklist` can also be used on their own, as can `Style`, the
small colour/bold style used for rendering.

## Demos

A non-interactive demo prints the list a few times as the tasks change,
including a narrow (40 column) view that shows truncation:

```
easyterminal-demo
easyterminal-demo --delay 0 --no-color
```

`--delay` sets the seconds to wait between progress steps (default 0.1), and
`--no-color` turns styling off. Styling is also off when output is not a
terminal. `easyterminal.demo.build_demo_tasks()` returns the sample task list
used by both demos.

An interactive full-screen demo, built on `blessed`, animates the progress
bars by one step every 0.1 seconds:

```
easyterminal-interactive
```

Keys in the interactive demo:

- `1` switches task 2 between active and done
- `2` starts task 3
- `3` moves task 3 forward by ten percent, marking it done at 100
- `q` or `Ctrl+C` quits

The state behind this screen is `easyterminal.interactive.DemoModel`, with
`handle_key`, `tick`, `resize` and `view`, usable without a terminal.