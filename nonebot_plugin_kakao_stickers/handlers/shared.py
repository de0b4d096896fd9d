from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from nonebot import logger
from nonebot.exception import MatcherException

HELP_TEXT = (
    "이모티콘을 스티커로 변환하시려면 /create [이모티콘URL] 을 입력해주세요."
    " 웹 버전 이모티콘 스토어 URL만 가능합니다."
)
INVALID_URL_TEXT = "유효한 이모티콘 URL이 아닙니다."
LOADING_TEXT = "이모티콘 정보를 불러오는 중입니다."


@asynccontextmanager
async def exception_log(msg: str) -> AsyncIterator[None]:
    """Log and drop errors so the dispatcher keeps serving other chats.

    Matcher control flow (`finish`, `pause`, ...) still passes through,
    adapter errors such as `ActionFailed` are logged like any other.
    """

    try:
        yield
    except MatcherException:
        raise
    except Exception:
        logger.exception(msg)
