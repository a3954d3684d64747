from vod.models.video import Video
from vod.repositories.video_repository import VideoStore


class VideoService:
    def __init__(self, store: VideoStore):
        self.store = store

    def get_all_videos(self) -> list[Video]:
        return self.store.list_all()
