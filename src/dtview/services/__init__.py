"""Project document acquisition and normalization."""

from .loader import LoadResult, ProjectLoader, ProjectSource, load_project
from .normalize import normalize, recover_single_task
from .sample import sample_document

__all__ = [
    "LoadResult",
    "ProjectLoader",
    "ProjectSource",
    "load_project",
    "normalize",
    "recover_single_task",
    "sample_document",
]
