# tests/conftest.py
"""Shared fixtures for vidplayer tests."""

import random

import pytest

from vidplayer.models import Video
from vidplayer.service import VideoPlayerService
from vidplayer.storage.memory import InMemoryVideoCatalog


CATALOG_TEXT = """\
Funny Dogs | funny_dogs_video_id | #dog , #animal
Amazing Cats | amazing_cats_video_id | #cat , #animal
Another Cat Video | another_cat_video_id | #cat , #animal
Life at Google | life_at_google_video_id | #google , #career
Video about nothing | nothing_video_id |
"""


@pytest.fixture
def sample_videos():
    """The five videos of the bundled catalog."""
    return [
        Video(video_id="funny_dogs_video_id", title="Funny Dogs", tags=["#dog", "#animal"]),
        Video(video_id="amazing_cats_video_id", title="Amazing Cats", tags=["#cat", "#animal"]),
        Video(video_id="another_cat_video_id", title="Another Cat Video", tags=["#cat", "#animal"]),
        Video(video_id="life_at_google_video_id", title="Life at Google", tags=["#google", "#career"]),
        Video(video_id="nothing_video_id", title="Video about nothing"),
    ]


@pytest.fixture
def catalog(sample_videos):
    """InMemoryVideoCatalog holding sample_videos."""
    return InMemoryVideoCatalog(sample_videos)


@pytest.fixture
def service(catalog):
    """VideoPlayerService over the sample catalog with a seeded RNG."""
    return VideoPlayerService(catalog, rng=random.Random(42))


@pytest.fixture
def catalog_file(tmp_path):
    """Catalog file on disk with the same content as sample_videos."""
    path = tmp_path / "videos.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return path
