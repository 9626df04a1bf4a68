"""Tests for the HTML adapter."""

from dtview.view import ViewController, element, render_document, to_html


def test_text_and_attributes_are_escaped():
    html = to_html(element("a", text="<b>&", attrs={"href": 'x"y'}))
    assert html == '<a href="x&quot;y">&lt;b&gt;&amp;</a>'


def test_boolean_attributes():
    html = to_html(element("video", attrs={"controls": True, "muted": False, "src": "v.mp4"}))
    assert html == '<video controls src="v.mp4"></video>'


def test_void_tags_have_no_closing_tag():
    assert to_html(element("source", attrs={"src": "a.mp3"})) == '<source src="a.mp3">'


def test_document(sample_project):
    view = ViewController(sample_project)
    view.toggle_asset(1)
    doc = render_document(view.render(), title=sample_project.name)
    assert doc.startswith("<!DOCTYPE html>")
    assert "<title>Example DT Project (sample)</title>" in doc
    assert 'class="task-item active"' in doc
    assert 'aria-expanded="true"' in doc
    assert 'class="asset-desc open"' in doc
    assert "Introduction &amp; Reading" in doc
