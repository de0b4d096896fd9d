import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import cast

from cookit.loguru import warning_suppress
from nonebot.adapters.telegram import Adapter, Bot
from nonebot.adapters.telegram.exception import ActionFailed, NetworkError
from nonebot.adapters.telegram.model import InputSticker
from nonebot.drivers import Request

from .consts import STICKER_FORMAT
from .models import PreparedSticker

MALFORMED_RESPONSE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


@contextmanager
def wrap_malformed_response(method: str) -> Iterator[None]:
    """Turn unreadable Bot API responses into `ActionFailed`."""

    try:
        yield
    except MALFORMED_RESPONSE_ERRORS as e:
        raise ActionFailed(f"{method} returned a malformed response: {e}") from e


async def upload_sticker_file(bot: Bot, user_id: int, data: bytes) -> str:
    """Upload PNG bytes with `uploadStickerFile` and return the file id.

    The adapter only moves bytes into multipart bodies for the `send*` media
    methods, so this request is built here with the bot's own config and
    sent through the adapter's driver.
    """

    adapter = cast(Adapter, bot.adapter)
    request = Request(
        "POST",
        f"{bot.bot_config.api_server}bot{bot.bot_config.token}/uploadStickerFile",
        data={"user_id": str(user_id), "sticker_format": STICKER_FORMAT},
        files={"sticker": ("sticker.png", data, "image/png")},
        proxy=adapter.adapter_config.proxy,
    )
    try:
        response = await adapter.request(request)
    except Exception as e:
        raise NetworkError("HTTP request failed") from e

    with wrap_malformed_response("uploadStickerFile"):
        payload = json.loads(response.content or b"")
        if not payload.get("ok"):
            raise ActionFailed(payload.get("description"))
        return payload["result"]["file_id"]


class TelegramStickerPublisher:
    def __init__(self, bot: Bot) -> None:
        self.bot = bot

    async def make_input_sticker(
        self,
        user_id: int,
        sticker: PreparedSticker,
    ) -> InputSticker:
        return InputSticker(
            sticker=await upload_sticker_file(self.bot, user_id, sticker.data),
            format=STICKER_FORMAT,
            emoji_list=sticker.emoji_list,
        )

    async def create_new_sticker_set(
        self,
        user_id: int,
        name: str,
        title: str,
        stickers: list[PreparedSticker],
    ) -> None:
        input_stickers = [await self.make_input_sticker(user_id, x) for x in stickers]
        with wrap_malformed_response("createNewStickerSet"):
            await self.bot.create_new_sticker_set(
                user_id=user_id,
                name=name,
                title=title,
                stickers=input_stickers,
            )

    async def add_sticker_to_set(
        self,
        user_id: int,
        name: str,
        sticker: PreparedSticker,
    ) -> None:
        input_sticker = await self.make_input_sticker(user_id, sticker)
        with wrap_malformed_response("addStickerToSet"):
            await self.bot.add_sticker_to_set(
                user_id=user_id,
                name=name,
                sticker=input_sticker,
            )


class ChatProgressReporter:
    def __init__(self, bot: Bot, chat_id: int) -> None:
        self.bot = bot
        self.chat_id = chat_id

    async def send(self, text: str) -> int:
        message = await self.bot.send_message(
            chat_id=self.chat_id,
            text=text,
            parse_mode="HTML",
        )
        return message.message_id

    async def edit(self, message_id: int, text: str) -> None:
        with warning_suppress(f"Failed to edit progress message {message_id}"):
            await self.bot.edit_message_text(
                text=text,
                chat_id=self.chat_id,
                message_id=message_id,
                parse_mode="HTML",
            )
