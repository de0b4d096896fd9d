from cookit.pyd import model_with_model_config
from pydantic import BaseModel, ConfigDict, Field


@model_with_model_config(ConfigDict(frozen=True))
class PackMetadata(BaseModel):
    title: str
    thumbnail_urls: tuple[str, ...] = Field(alias="thumbnailUrls")


class PackMetadataResponse(BaseModel):
    result: PackMetadata


class PreparedSticker(BaseModel):
    data: bytes
    emoji_list: list[str]


class FailedUpload(BaseModel):
    index: int
    reason: str


class ConvertResult(BaseModel):
    set_name: str
    title: str
    link: str
    total: int
    failed: list[FailedUpload] = []

    @property
    def succeed_count(self) -> int:
        return self.total - len(self.failed)
