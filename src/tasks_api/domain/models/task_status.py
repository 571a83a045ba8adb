from enum import Enum


class TaskStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
