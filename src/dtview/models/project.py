"""Project data model."""

from pathlib import Path
from typing import Any, List, Mapping, Optional
from pydantic import BaseModel, Field
import yaml

from .fields import as_text, pick
from .task import Task

DEFAULT_PROJECT_ID = "p-sample"
DEFAULT_PROJECT_NAME = "Sample"


class Project(BaseModel):
    """Top-level container of tasks, in display order."""

    id: Optional[str] = Field(DEFAULT_PROJECT_ID, description="Project identifier")
    name: Optional[str] = Field(DEFAULT_PROJECT_NAME, description="Project name")
    tasks: List[Task] = Field(default_factory=list, description="Tasks in display order")

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Project":
        """Build the canonical project from a normalized document."""
        raw_tasks = raw.get("tasks")
        if not isinstance(raw_tasks, list):
            raw_tasks = []
        return cls(
            id=as_text(pick(raw, "projectId", "id", "project_id", default=DEFAULT_PROJECT_ID)),
            name=as_text(pick(raw, "projectName", "name", "project_name", default=DEFAULT_PROJECT_NAME)),
            tasks=[Task.from_raw(item, i) for i, item in enumerate(raw_tasks)],
        )

    @property
    def asset_count(self) -> int:
        """Total number of assets across all tasks."""
        return sum(len(task.assets) for task in self.tasks)

    def to_yaml(self, path: Path) -> None:
        """Save the project to a YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
