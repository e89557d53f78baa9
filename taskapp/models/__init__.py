from .task import DESCRIPTION_PREVIEW_LENGTH, Priority, Task

__all__ = ["DESCRIPTION_PREVIEW_LENGTH", "Priority", "Task"]
