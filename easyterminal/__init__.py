"""Terminal task list with status icons, messages and progress bars, plus two demos."""

__version__ = "0.1.0"
__all__ = ["tasklist", "demo", "interactive"]