"""Startup data: two sample videos, inserted only when the store is empty."""
import logging

from vod.repositories.video_repository import VideoStore
from vod.schemas.video import VideoCreate

logger = logging.getLogger(__name__)

SEED_VIDEOS = [
    VideoCreate(
        title="Video 1",
        description="Description 1",
        duration=100,
        thumbnail_url="https://example.com/thumbnail1.jpg",
        file_path="path/to/video1.mp4",
    ),
    VideoCreate(
        title="Video 2",
        description="Description 2",
        duration=200,
        thumbnail_url="https://example.com/thumbnail2.jpg",
        file_path="path/to/video2.mp4",
    ),
]


def seed_videos(store: VideoStore) -> int:
    """Insert SEED_VIDEOS if the store has no videos. Returns how many were inserted."""
    existing = store.count_all()
    if existing != 0:
        logger.info("Video store already has %s videos; skipping seed", existing)
        return 0
    for record in SEED_VIDEOS:
        store.insert(record)
    logger.info("Seeded %s videos", len(SEED_VIDEOS))
    return len(SEED_VIDEOS)
