# ruff: noqa: E402

from nonebot.plugin import PluginMetadata, require

require("nonebot_plugin_alconna")

from .config import ConfigModel
from .consts import AUTHOR, DESCRIPTION, NAME
from .handlers import load_handlers

__version__ = "0.1.0"
__plugin_meta__ = PluginMetadata(
    name=NAME,
    description=DESCRIPTION,
    usage="/create <이모티콘 URL> 로 스티커 세트를 만듭니다",
    type="application",
    homepage="https://github.com/lgc-NB2Dev/nonebot-plugin-kakao-stickers",
    config=ConfigModel,
    supported_adapters={"~telegram"},
    extra={"License": "MIT", "Author": AUTHOR},
)


load_handlers()
