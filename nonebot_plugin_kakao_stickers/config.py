from typing import Optional

from cookit.pyd import get_alias_model
from nonebot import get_plugin_config
from pydantic import Field

BaseConfigModel = get_alias_model(lambda x: f"kakao_stickers_{x}")


class ConfigModel(BaseConfigModel):
    proxy: Optional[str] = Field(None, alias="proxy")

    request_timeout: float = 10.0

    sticker_size: int = 512
    default_emoji: str = "😀"


config: ConfigModel = get_plugin_config(ConfigModel)
