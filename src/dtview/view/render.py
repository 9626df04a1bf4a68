"""Pure render functions from view state to node trees."""

from typing import Optional, Sequence

from ..models import Asset, AssetType, Project, Task
from .media import MediaKind, media_kind, to_embed_url
from .tree import Node, element

EMPTY_ASSETS_MESSAGE = "No assets found for this task."
RESOURCE_LINK_LABEL = "Open resource"
IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"

ASSET_ICONS = {
    AssetType.VIDEO: "▶",
    AssetType.AUDIO: "♪",
    AssetType.FILE: "📄",
    AssetType.ARTICLE: "A",
}


def render_task_item(task: Task, index: int, active: bool = False) -> Node:
    """Render one sidebar entry."""
    return element(
        "li",
        element("div", cls="ticon", text=task.icon_letter),
        element("div", cls="ttext", text=task.display_name(index)),
        cls="task-item active" if active else "task-item",
        attrs={"role": "listitem", "tabindex": 0, "data-index": index},
    )


def render_task_list(tasks: Sequence[Task], selected_index: int) -> Node:
    """Render the sidebar with exactly one highlighted entry."""
    return element(
        "ul",
        *[render_task_item(task, i, i == selected_index) for i, task in enumerate(tasks)],
        cls="task-list",
        attrs={"id": "taskList", "role": "list"},
    )


def render_task_header(task: Optional[Task]) -> Node:
    return element(
        "header",
        element("h2", text=task.heading if task else "", attrs={"id": "taskTitle"}),
        element("p", text=(task.meta or "") if task else "", attrs={"id": "taskMeta"}),
        cls="task-header",
    )


def render_media(asset: Asset) -> Optional[Node]:
    """Render the inline player, embed frame or outbound link for an asset."""
    kind = media_kind(asset)
    if kind is None:
        return None

    if kind == MediaKind.VIDEO:
        media = element("video", attrs={"controls": True, "src": asset.url})
    elif kind == MediaKind.AUDIO:
        media = element("audio", attrs={"controls": True, "src": asset.url})
    elif kind == MediaKind.EMBED:
        media = element(
            "iframe",
            attrs={
                "width": "100%",
                "height": "320",
                "allow": IFRAME_ALLOW,
                "src": to_embed_url(asset.url),
                "referrerpolicy": "no-referrer",
            },
        )
    else:
        media = element(
            "a",
            text=RESOURCE_LINK_LABEL,
            attrs={"href": asset.url, "target": "_blank", "rel": "noopener noreferrer"},
        )
    return element("div", media, cls="media-wrapper")


def asset_subtitle(asset: Asset) -> str:
    label = asset.type.value.upper()
    return f"{label} · resource available" if asset.has_url else label


def render_asset_card(asset: Asset, expanded: bool = False, position: int = 0) -> Node:
    """Render a collapsible asset card.

    The toggle button carries ``aria-expanded`` and the rotated arrow; the
    description block gets the ``open`` class while expanded.
    """
    card_attrs = {"data-position": position}
    if asset.id is not None:
        card_attrs["id"] = asset.id

    top = element(
        "div",
        element(
            "div",
            element("div", cls="asset-icon", text=ASSET_ICONS[asset.type]),
            element(
                "div",
                element("h3", cls="asset-title", text=asset.title or ""),
                element("div", cls="asset-sub", text=asset_subtitle(asset)),
                cls="asset-meta",
            ),
            cls="asset-left",
        ),
        element(
            "button",
            element(
                "span",
                cls="arrow",
                text="➤",
                attrs={"style": f"transform: rotate({90 if expanded else 0}deg)"},
            ),
            cls="toggle-arrow",
            attrs={
                "aria-expanded": "true" if expanded else "false",
                "title": "Hide description" if expanded else "Show description",
                "data-position": position,
            },
        ),
        cls="asset-top",
    )
    desc = element(
        "div",
        element("p", text=asset.description or ""),
        render_media(asset),
        cls="asset-desc open" if expanded else "asset-desc",
    )
    return element("article", top, desc, cls="asset-card", attrs=card_attrs)


def render_assets(task: Optional[Task], expanded: Sequence[bool] = ()) -> Node:
    """Render the detail pane for a task.

    A task without assets renders a single placeholder and no cards.
    """
    assets = task.assets if task else []
    if not assets:
        children = [element("div", cls="asset-card empty", text=EMPTY_ASSETS_MESSAGE)]
    else:
        children = [
            render_asset_card(asset, i < len(expanded) and expanded[i], i)
            for i, asset in enumerate(assets)
        ]
    return element("section", *children, cls="assets", attrs={"id": "assetsContainer"})


def render_board(project: Project, collapsed: bool = False) -> Node:
    """Render the journey board with its collapse toggle."""
    return element(
        "aside",
        element(
            "button",
            text="☰",
            attrs={
                "id": "board-toggle",
                "aria-pressed": "true" if collapsed else "false",
                "title": "Expand board" if collapsed else "Collapse board",
            },
        ),
        element("h1", cls="board-title", text=project.name or ""),
        element("p", cls="board-sub", text=f"{len(project.tasks)} task(s) · {project.asset_count} asset(s)"),
        cls="journey-board collapsed" if collapsed else "journey-board",
        attrs={"id": "journeyBoard"},
    )


def render_page(
    project: Project,
    selected_index: int = 0,
    expanded: Sequence[bool] = (),
    board_collapsed: bool = False,
) -> Node:
    """Render the whole page for a view state."""
    task = project.tasks[selected_index] if project.tasks else None
    return element(
        "div",
        render_board(project, board_collapsed),
        element("nav", render_task_list(project.tasks, selected_index), cls="sidebar"),
        element(
            "main",
            render_task_header(task),
            render_assets(task, expanded),
            cls="detail",
        ),
        cls="app",
    )
