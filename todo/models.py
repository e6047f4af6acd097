from dataclasses import asdict, dataclass, field


@dataclass
class Task:
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        if not isinstance(data, dict):
            raise ValueError(f"Task must be an object, got {type(data).__name__}")
        description = data.get("description")
        if not isinstance(description, str):
            raise ValueError("Task 'description' must be a string")
        return cls(description=description)


@dataclass
class TaskList:
    """Ordered tasks. Position in `tasks` is the only identity a task has."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TaskList":
        """Build from decoded JSON. Unknown keys are ignored; wrong shapes raise ValueError."""
        if not isinstance(data, dict):
            raise ValueError(f"Task list must be an object, got {type(data).__name__}")
        if "tasks" not in data:
            raise ValueError("Task list is missing 'tasks'")
        raw_tasks = data["tasks"]
        if not isinstance(raw_tasks, list):
            raise ValueError("Task list 'tasks' must be an array")
        return cls(tasks=[Task.from_dict(raw) for raw in raw_tasks])
