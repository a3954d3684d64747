from fastapi import APIRouter, Depends, Request
from vod.schemas.video import GetVideosResponse, VideoResponse
from vod.services.video_service import VideoService

router = APIRouter(prefix="/api/videos", tags=["videos"])


def get_video_service(request: Request) -> VideoService:
    """VideoService over the store built at startup (see vod.main lifespan)."""
    return VideoService(request.app.state.video_store)


@router.get("", response_model=GetVideosResponse)
def list_videos(service: VideoService = Depends(get_video_service)):
    videos = service.get_all_videos()
    return GetVideosResponse(data=[VideoResponse.model_validate(v) for v in videos])
