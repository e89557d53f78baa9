from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

DESCRIPTION_PREVIEW_LENGTH = 100


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value) -> "Priority":
        """Map a raw priority to a member, falling back to Medium."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.MEDIUM


@dataclass
class Task:
    """A single to-do item."""
    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["priority"] = self.priority.value
        return data

    def summary(self) -> Dict[str, Any]:
        # List view only carries the start of the description
        data = self.to_dict()
        data["description"] = self.description[:DESCRIPTION_PREVIEW_LENGTH]
        return data
