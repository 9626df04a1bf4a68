"""Reshape incoming project documents into the project shape."""

import logging
from typing import Any, Dict

from ..models.fields import pick
from ..models.project import DEFAULT_PROJECT_ID, DEFAULT_PROJECT_NAME

logger = logging.getLogger(__name__)

# Placeholders used when a bare task document is promoted to a project
WRAPPED_PROJECT_ID = "p-"
WRAPPED_PROJECT_NAME = "project"


def _is_list(doc: Any, key: str) -> bool:
    return isinstance(doc, dict) and isinstance(doc.get(key), list)


def normalize(raw: Any) -> Any:
    """Interpret a raw document as a project document.

    Recognized shapes, first match wins:

    - ``{"tasks": [...]}``: already a project, returned unchanged.
    - ``{"assets": [...]}``: a single task, wrapped in a one-task project.
    - ``{"project": {"tasks": ...}}``: unwrapped to the inner project.

    Anything else is passed through unchanged.
    """
    if _is_list(raw, "tasks"):
        return raw

    if _is_list(raw, "assets"):
        return {
            "projectId": pick(raw, "projectId", default=WRAPPED_PROJECT_ID),
            "projectName": pick(raw, "projectName", default=WRAPPED_PROJECT_NAME),
            "tasks": [raw],
        }

    inner = raw.get("project") if isinstance(raw, dict) else None
    if isinstance(inner, dict) and inner.get("tasks") is not None:
        return inner

    logger.warning("Unrecognized project document shape, passing it through")
    return raw


def has_tasks(doc: Dict[str, Any]) -> bool:
    """Whether the document lists at least one task."""
    tasks = doc.get("tasks")
    return isinstance(tasks, list) and len(tasks) > 0


def recover_single_task(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrap a document with no tasks as a project holding one task.

    The task is ``doc["task"]`` when present, otherwise the document itself.
    Known project id and name are kept. Documents that already list tasks
    are returned unchanged.
    """
    if has_tasks(doc):
        return doc

    logger.info("Project has no tasks, treating the document as a single task")
    return {
        "projectId": pick(doc, "projectId", default=DEFAULT_PROJECT_ID),
        "projectName": pick(doc, "projectName", default=DEFAULT_PROJECT_NAME),
        "tasks": [pick(doc, "task", default=doc)],
    }
