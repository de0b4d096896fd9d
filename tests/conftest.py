"""Shared pytest fixtures for the kakao stickers plugin tests."""

from typing import Callable

import nonebot
import pytest
import skia
from nonebot.adapters.telegram import Adapter as TelegramAdapter


def pytest_configure(config: pytest.Config) -> None:
    # plugin modules read their config at import time, so NoneBot has to be
    # ready before collection; nonebug reuses the same driver afterwards
    # every test event reuses message_id=1, so alconna's per-message-id
    # parse cache would replay an earlier test's message
    nonebot.init(driver="~none", alconna_cache_message=False)
    nonebot.get_driver().register_adapter(TelegramAdapter)
    nonebot.load_plugin("nonebot_plugin_kakao_stickers")


@pytest.fixture
def png_factory() -> Callable[..., bytes]:
    """Build solid-colour PNG bytes of any size."""

    def make(width: int, height: int, color: int = skia.ColorRED) -> bytes:
        surface = skia.Surface(width, height)
        with surface as canvas:
            canvas.clear(color)
        return surface.makeImageSnapshot().encodeToData(skia.kPNG, 100).bytes()

    return make
