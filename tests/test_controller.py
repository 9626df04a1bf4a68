"""Tests for the view state machine and page rendering."""

import pytest
import requests

from dtview.services import ProjectLoader
from dtview.view import ViewController
from dtview.view.render import EMPTY_ASSETS_MESSAGE

from .conftest import FakeSession


def _active_indexes(view):
    return [item.attrs["data-index"] for item in view.render_task_list().by_class("active")]


def _cards(node):
    return [n for n in node.by_class("asset-card") if n.tag == "article"]


def _card_states(view):
    return [card.by_class("toggle-arrow")[0].attrs["aria-expanded"] for card in _cards(view.render())]


class TestTaskList:
    def test_entries(self, sample_project):
        items = ViewController(sample_project).render_task_list().by_class("task-item")
        assert [i.by_class("ttext")[0].text for i in items] == ["Introduction & Reading", "Practical Task"]
        assert [i.by_class("ticon")[0].text for i in items] == ["I", "P"]
        assert all(i.attrs["tabindex"] == 0 for i in items)

    def test_unnamed_task_label(self):
        from dtview.models import Project

        project = Project.from_raw({"tasks": [{"taskName": "A"}, {}]})
        items = ViewController(project).render_task_list().by_class("task-item")
        assert items[1].by_class("ttext")[0].text == "Task 2"
        assert items[1].by_class("ticon")[0].text == "T"

    def test_first_task_selected_initially(self, sample_project):
        view = ViewController(sample_project)
        assert view.selected_index == 0
        assert _active_indexes(view) == [0]


class TestSelectTask:
    def test_moves_highlight(self, sample_project):
        view = ViewController(sample_project)
        view.select_task(1)
        assert _active_indexes(view) == [1]

    def test_idempotent(self, sample_project):
        view = ViewController(sample_project)
        view.select_task(1)
        view.select_task(1)
        assert _active_indexes(view) == [1]

    def test_renders_header_and_assets(self, sample_project):
        detail = ViewController(sample_project).select_task(1)
        assert detail.by_id("taskTitle").text == "Practical Task"
        assert detail.by_id("taskMeta").text == "Hands-on assets (files, links)"
        assert [c.attrs["id"] for c in _cards(detail)] == ["b1", "b2"]

    def test_out_of_range(self, sample_project):
        view = ViewController(sample_project)
        with pytest.raises(IndexError):
            view.select_task(2)
        with pytest.raises(IndexError):
            view.select_task(-1)
        assert view.selected_index == 0

    def test_resets_card_state(self, sample_project):
        view = ViewController(sample_project)
        view.toggle_asset(0)
        view.select_task(1)
        view.select_task(0)
        assert view.expanded == (False, False, False)

    @pytest.mark.parametrize("key", [None, "Enter", " "])
    def test_activation_keys(self, sample_project, key):
        view = ViewController(sample_project)
        assert view.activate(1, key) is not None
        assert view.selected_index == 1

    def test_other_keys_are_ignored(self, sample_project):
        view = ViewController(sample_project)
        assert view.activate(1, "a") is None
        assert view.selected_index == 0


class TestAssetCards:
    def test_cards_start_collapsed(self, two_asset_project):
        view = ViewController(two_asset_project)
        assert _card_states(view) == ["false", "false"]
        assert not view.render().by_class("open")

    def test_toggle_affects_only_one_card(self, two_asset_project):
        view = ViewController(two_asset_project)
        assert view.toggle_asset(0) is True
        assert _card_states(view) == ["true", "false"]
        cards = _cards(view.render())
        assert cards[0].by_class("asset-desc")[0].has_class("open")
        assert not cards[1].by_class("asset-desc")[0].has_class("open")
        assert "rotate(90deg)" in cards[0].by_class("arrow")[0].attrs["style"]
        assert "rotate(0deg)" in cards[1].by_class("arrow")[0].attrs["style"]

    def test_toggle_twice_collapses(self, two_asset_project):
        view = ViewController(two_asset_project)
        view.toggle_asset(1)
        assert view.toggle_asset(1) is False
        assert view.expanded == (False, False)

    def test_toggle_missing_card(self, two_asset_project):
        view = ViewController(two_asset_project, selected_index=1)
        with pytest.raises(IndexError):
            view.toggle_asset(0)

    def test_empty_task_shows_placeholder(self, two_asset_project):
        view = ViewController(two_asset_project)
        detail = view.select_task(1)
        placeholders = detail.by_class("empty")
        assert len(placeholders) == 1
        assert placeholders[0].text == EMPTY_ASSETS_MESSAGE
        assert _cards(detail) == []

    def test_media_rendering(self, sample_project):
        cards = _cards(ViewController(sample_project).render())
        article, video, audio = cards
        link = article.find_all(lambda n: n.tag == "a")[0]
        assert link.text == "Open resource"
        assert link.attrs["target"] == "_blank"
        assert link.attrs["rel"] == "noopener noreferrer"
        assert video.find_all(lambda n: n.tag == "video")[0].attrs["controls"] is True
        assert audio.find_all(lambda n: n.tag == "audio")[0].attrs["src"].endswith(".mp3")

    def test_embed_frame(self):
        from dtview.models import Project

        project = Project.from_raw({"tasks": [{"assets": [
            {"type": "video", "url": "https://youtu.be/xyz789"},
        ]}]})
        frame = ViewController(project).render().find_all(lambda n: n.tag == "iframe")[0]
        assert frame.attrs["src"] == "https://www.youtube.com/embed/xyz789"
        assert frame.attrs["referrerpolicy"] == "no-referrer"

    def test_no_url_has_no_media(self, two_asset_project):
        cards = _cards(ViewController(two_asset_project).render())
        assert cards[1].by_class("media-wrapper") == []
        assert cards[1].by_class("asset-sub")[0].text == "ARTICLE"
        assert cards[0].by_class("asset-sub")[0].text == "VIDEO · resource available"


class TestBoard:
    def test_toggle(self, sample_project):
        view = ViewController(sample_project)
        assert not view.render_board().has_class("collapsed")
        assert view.toggle_board() is True
        board = view.render_board()
        assert board.has_class("collapsed")
        assert board.by_id("board-toggle").attrs["aria-pressed"] == "true"
        assert view.toggle_board() is False

    def test_independent_of_selection(self, sample_project):
        view = ViewController(sample_project)
        view.toggle_board()
        view.select_task(1)
        assert view.board_collapsed
        assert view.selected_index == 1


def test_failed_fetch_renders_sample_tasks():
    session = FakeSession(error=requests.ConnectionError("offline"))
    project = ProjectLoader("https://example.test/p.json", session=session).load()
    page = ViewController(project).render()
    assert len(page.by_class("task-item")) == 2
    assert page.by_id("taskTitle").text == "Introduction & Reading"
