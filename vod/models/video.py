"""Video metadata. The media file itself lives elsewhere; file_path is only a locator."""
from sqlalchemy import Column, Integer, String, Text
from vod.database import Base


class Video(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    duration = Column(Integer, nullable=False, default=0)  # seconds
    thumbnail_url = Column(String(512), nullable=False, default="")
    file_path = Column(String(512), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Video id={self.id} title={self.title!r}>"
