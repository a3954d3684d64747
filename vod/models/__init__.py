from vod.models.video import Video

__all__ = ["Video"]
