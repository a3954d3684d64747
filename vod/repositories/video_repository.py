"""
Video persistence. VideoStore is the contract the service and the seeder depend on;
the adapter is picked once at startup by build_video_store() and kept on app.state.
Storage errors are not caught here; they propagate to the caller.
"""
import logging
import threading
from abc import ABC, abstractmethod

from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from vod.config import Settings
from vod.database import create_tables, make_engine, make_session_factory
from vod.models.video import Video
from vod.schemas.video import VideoCreate

logger = logging.getLogger(__name__)


class VideoStore(ABC):
    @abstractmethod
    def count_all(self) -> int:
        pass

    @abstractmethod
    def list_all(self) -> list[Video]:
        """All videos in insertion order."""
        pass

    @abstractmethod
    def insert(self, record: VideoCreate) -> Video:
        """Persist a new video and return it with its assigned id."""
        pass


class SqlVideoStore(VideoStore):
    """One session per operation, so the store itself can be shared across request threads."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def count_all(self) -> int:
        with self._session_factory() as db:
            return db.query(func.count(Video.id)).scalar() or 0

    def list_all(self) -> list[Video]:
        with self._session_factory() as db:
            return db.query(Video).order_by(Video.id).all()

    def insert(self, record: VideoCreate) -> Video:
        with self._session_factory() as db:
            video = Video(**record.model_dump())
            db.add(video)
            db.commit()
            db.refresh(video)
            return video


class InMemoryVideoStore(VideoStore):
    """Process-local store. Ids start at 1 and are never reused."""

    def __init__(self):
        self._videos: list[Video] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def count_all(self) -> int:
        with self._lock:
            return len(self._videos)

    def list_all(self) -> list[Video]:
        with self._lock:
            return [_copy(v) for v in self._videos]

    def insert(self, record: VideoCreate) -> Video:
        with self._lock:
            video = Video(id=self._next_id, **record.model_dump())
            self._next_id += 1
            self._videos.append(video)
            return _copy(video)


def _copy(video: Video) -> Video:
    return Video(
        id=video.id,
        title=video.title,
        description=video.description,
        duration=video.duration,
        thumbnail_url=video.thumbnail_url,
        file_path=video.file_path,
    )


def build_video_store(settings: Settings, session_factory: sessionmaker | None = None) -> VideoStore:
    """
    Pick the store adapter from settings.store ("sql" or "memory").
    The SQL adapter gets its own engine on settings.database_url unless a session factory is given.
    """
    kind = (settings.store or "").strip().lower()
    if kind == "memory":
        logger.info("Using in-memory video store")
        return InMemoryVideoStore()
    if kind == "sql":
        if session_factory is None:
            engine = make_engine(settings.database_url)
            if settings.create_tables:
                create_tables(engine)
            session_factory = make_session_factory(engine)
        logger.info("Using SQL video store")
        return SqlVideoStore(session_factory)
    raise ValueError(f"Unknown video store {settings.store!r}; expected 'sql' or 'memory'")
