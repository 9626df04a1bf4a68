"""Bundled sample project, used when the remote document is unavailable."""

import copy
from typing import Any, Dict

_SAMPLE_PROJECT: Dict[str, Any] = {
    "projectId": "ddugky-001",
    "projectName": "Example DT Project (sample)",
    "tasks": [
        {
            "taskId": "t101",
            "taskName": "Introduction & Reading",
            "taskMeta": "Contains articles and podcasts",
            "assets": [
                {
                    "assetId": "a1",
                    "title": "Intro Article: Understanding DTthon",
                    "type": "article",
                    "url": "https://deepthought.education/",
                    "description": "A short article about DeepThought's DTthon process and assessment philosophy.",
                },
                {
                    "assetId": "a2",
                    "title": "Orientation Video",
                    "type": "video",
                    "url": "https://interactive-examples.mdn.mozilla.net/media/cc0-videos/flower.mp4",
                    "description": "Short video explaining how the selection process works.",
                },
                {
                    "assetId": "a3",
                    "title": "Founder Podcast (audio)",
                    "type": "audio",
                    "url": "https://www.soundhelix.com/examples/mp3/SoundHelix-Song-1.mp3",
                    "description": "Listen to the founder discuss the vision.",
                },
            ],
        },
        {
            "taskId": "t102",
            "taskName": "Practical Task",
            "taskMeta": "Hands-on assets (files, links)",
            "assets": [
                {
                    "assetId": "b1",
                    "title": "Assignment PDF",
                    "type": "file",
                    "url": "https://example.com/sample.pdf",
                    "description": "Downloadable assignment spec for the practical task.",
                },
                {
                    "assetId": "b2",
                    "title": "Reference Video",
                    "type": "video",
                    "url": "https://interactive-examples.mdn.mozilla.net/media/cc0-videos/flower.mp4",
                    "description": "Reference demonstration.",
                },
            ],
        },
    ],
}


def sample_document() -> Dict[str, Any]:
    """Return a fresh copy of the sample project document."""
    return copy.deepcopy(_SAMPLE_PROJECT)
