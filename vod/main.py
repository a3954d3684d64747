from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from vod.config import get_settings
from vod.repositories.video_repository import VideoStore, build_video_store
from vod.routers import videos
from vod.services.seeder import seed_videos


def create_app(store: VideoStore | None = None) -> FastAPI:
    """Build the API. Without an explicit store one is built from settings at startup."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        video_store = store
        if video_store is None:
            video_store = build_video_store(settings)
        if settings.seed_on_startup:
            seed_videos(video_store)
        app.state.video_store = video_store
        yield

    app = FastAPI(title="VOD API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(videos.router)
    return app


app = create_app()
