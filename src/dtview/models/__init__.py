"""Data models for the project viewer."""

from .asset import Asset, AssetType
from .task import Task
from .project import Project

__all__ = ["Asset", "AssetType", "Task", "Project"]
