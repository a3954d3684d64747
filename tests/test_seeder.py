from vod.schemas.video import VideoCreate
from vod.services.seeder import SEED_VIDEOS, seed_videos


def test_seed_empty_store(store):
    inserted = seed_videos(store)

    videos = store.list_all()
    assert inserted == 2
    assert len(videos) == 2
    assert len({v.id for v in videos}) == 2
    assert [(v.title, v.description, v.duration, v.thumbnail_url, v.file_path) for v in videos] == [
        ("Video 1", "Description 1", 100, "https://example.com/thumbnail1.jpg", "path/to/video1.mp4"),
        ("Video 2", "Description 2", 200, "https://example.com/thumbnail2.jpg", "path/to/video2.mp4"),
    ]


def test_seed_non_empty_store_is_noop(store):
    store.insert(
        VideoCreate(
            title="Existing",
            description="Already here",
            duration=42,
            thumbnail_url="https://example.com/existing.jpg",
            file_path="path/to/existing.mp4",
        )
    )

    assert seed_videos(store) == 0
    videos = store.list_all()
    assert store.count_all() == 1
    assert videos[0].title == "Existing"


def test_seed_twice_inserts_once(store):
    seed_videos(store)
    seed_videos(store)

    assert store.count_all() == len(SEED_VIDEOS)
