from pydantic import BaseModel, Field


class VideoCreate(BaseModel):
    title: str
    description: str
    duration: int = Field(ge=0)  # seconds
    thumbnail_url: str
    file_path: str


class VideoResponse(BaseModel):
    id: int
    title: str
    description: str
    duration: int
    thumbnail_url: str = Field(serialization_alias="thumbnailUrl")
    file_path: str = Field(serialization_alias="filePath")

    class Config:
        from_attributes = True


class GetVideosResponse(BaseModel):
    data: list[VideoResponse]
