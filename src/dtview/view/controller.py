"""View state machine: selected task, card expansion and board toggle."""

import logging
from typing import List, Optional, Tuple

from ..models import Project, Task
from .render import (
    render_assets,
    render_board,
    render_page,
    render_task_header,
    render_task_list,
)
from .tree import Node, element

logger = logging.getLogger(__name__)

ACTIVATION_KEYS = ("Enter", " ")


class ViewController:
    """Owns the view state for one project.

    The project is read-only. Everything that changes in response to user
    input lives here: the selected task index, the expanded flag of each
    card currently on screen, and whether the journey board is collapsed.
    """

    def __init__(self, project: Project, selected_index: int = 0) -> None:
        self._project = project
        self._selected_index = 0
        self._expanded: List[bool] = []
        self._board_collapsed = False
        if project.tasks:
            self.select_task(selected_index)

    @property
    def project(self) -> Project:
        return self._project

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_task(self) -> Optional[Task]:
        if not self._project.tasks:
            return None
        return self._project.tasks[self._selected_index]

    @property
    def expanded(self) -> Tuple[bool, ...]:
        """Expanded flags of the cards for the selected task, in order."""
        return tuple(self._expanded)

    @property
    def board_collapsed(self) -> bool:
        return self._board_collapsed

    def render_task_list(self) -> Node:
        return render_task_list(self._project.tasks, self._selected_index)

    def select_task(self, index: int) -> Node:
        """Select the task at ``index`` and return the re-rendered detail pane.

        Cards of the newly rendered task all start collapsed.

        Raises:
            IndexError: If ``index`` is outside the task list.
        """
        tasks = self._project.tasks
        if not 0 <= index < len(tasks):
            raise IndexError(f"Task index {index} out of range (0..{len(tasks) - 1})")

        self._selected_index = index
        task = tasks[index]
        self._expanded = [False] * len(task.assets)
        logger.debug(f"Selected task {index}: {task.display_name(index)}")
        return element(
            "main",
            render_task_header(task),
            self.render_assets_for_task(task),
            cls="detail",
        )

    def activate(self, index: int, key: Optional[str] = None) -> Optional[Node]:
        """Handle a click (``key=None``) or key press on a sidebar entry."""
        if key is not None and key not in ACTIVATION_KEYS:
            return None
        return self.select_task(index)

    def render_assets_for_task(self, task: Task) -> Node:
        """Render the asset list; only the selected task shows expanded cards."""
        expanded = self._expanded if task is self.selected_task else ()
        return render_assets(task, expanded)

    def toggle_asset(self, position: int) -> bool:
        """Flip the expanded flag of one card and return its new state.

        Raises:
            IndexError: If there is no card at ``position``.
        """
        if not 0 <= position < len(self._expanded):
            raise IndexError(f"No asset card at position {position}")
        self._expanded[position] = not self._expanded[position]
        return self._expanded[position]

    def toggle_board(self) -> bool:
        """Flip the journey board between collapsed and expanded."""
        self._board_collapsed = not self._board_collapsed
        return self._board_collapsed

    def render_board(self) -> Node:
        return render_board(self._project, self._board_collapsed)

    def render(self) -> Node:
        """Render the full page for the current state."""
        return render_page(
            self._project,
            self._selected_index,
            self._expanded,
            self._board_collapsed,
        )
