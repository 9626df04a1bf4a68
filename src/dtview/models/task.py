"""Task data model."""

import logging
from typing import Any, List, Mapping, Optional
from pydantic import BaseModel, Field

from .asset import Asset
from .fields import as_text, pick

logger = logging.getLogger(__name__)


class Task(BaseModel):
    """One unit of work within a project."""

    id: Optional[str] = Field(..., description="Task identifier")
    name: Optional[str] = Field(None, description="Task name")
    meta: Optional[str] = Field("", description="Free-text meta line")
    assets: List[Asset] = Field(default_factory=list, description="Attached assets")

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def from_raw(cls, raw: Any, position: int = 0) -> "Task":
        """Build a task from a source document.

        Args:
            raw: Task document. Anything that is not a mapping yields an
                empty task.
            position: Zero-based position of the task in its project, used
                for the default identifier.
        """
        if not isinstance(raw, Mapping):
            logger.warning(f"Task at position {position} is not an object")
            raw = {}

        raw_assets = raw.get("assets")
        assets: List[Asset] = []
        if isinstance(raw_assets, list):
            for item in raw_assets:
                if isinstance(item, Mapping):
                    assets.append(Asset.from_raw(item))
                else:
                    logger.warning(f"Skipping non-object asset entry: {item!r}")

        return cls(
            id=as_text(pick(raw, "taskId", "id", "task_id", default=f"task-{position + 1}")),
            name=as_text(pick(raw, "taskName", "name", "task_name")),
            meta=as_text(pick(raw, "taskMeta", "meta", "task_meta", default="")),
            assets=assets,
        )

    def display_name(self, position: int) -> str:
        """Return the sidebar label for the task at ``position``."""
        return self.name or f"Task {position + 1}"

    @property
    def icon_letter(self) -> str:
        """First character of the task name, ``T`` when there is none."""
        return (self.name or "Task")[0]

    @property
    def heading(self) -> str:
        """Title shown in the detail header."""
        return self.name or "Untitled Task"
