from arclet.alconna import Alconna, Args, CommandMeta, MultiVar
from nonebot import logger
from nonebot.adapters.telegram import Bot
from nonebot.adapters.telegram.event import MessageEvent
from nonebot_plugin_alconna import Match, on_alconna

from ..pipeline import convert_pack
from ..source_fetch import extract_pack_token
from ..telegram import ChatProgressReporter, TelegramStickerPublisher
from .shared import INVALID_URL_TEXT, LOADING_TEXT, exception_log

m_create = on_alconna(
    Alconna(
        "create",
        Args["args?#이모티콘 URL", MultiVar(str, "*")],
        meta=CommandMeta(description="이모티콘을 텔레그램 스티커 세트로 변환"),
    ),
    use_cmd_start=True,
)


@m_create.handle()
async def _(bot: Bot, event: MessageEvent, args: Match[tuple[str, ...]]):
    urls = args.result if args.available else ()
    if len(urls) != 1 or not extract_pack_token(urls[0]):
        await m_create.finish(INVALID_URL_TEXT)

    # filled from `getMe` by the adapter before polling starts
    if not bot.username:
        logger.error(f"Bot {bot.self_id} has no username yet, cannot name sets")
        await m_create.finish()

    url = urls[0]
    await m_create.send(LOADING_TEXT)

    async with exception_log(f"Failed to convert pack {url}"):
        result = await convert_pack(
            url,
            int(event.get_user_id()),
            bot.username,
            TelegramStickerPublisher(bot),
            ChatProgressReporter(bot, event.chat.id),
        )
        logger.info(
            f"Converted pack {url} into `{result.set_name}`"
            f" ({result.succeed_count}/{result.total} stickers)",
        )
