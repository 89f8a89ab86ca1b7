from pydantic import BaseModel


class PhotoOut(BaseModel):
    id: str
    url: str
    alt: str | None


class PhotoUploadOut(BaseModel):
    success: bool = True
    photo: PhotoOut


class PhotoListOut(BaseModel):
    photos: list[PhotoOut]
