from html import escape
from typing import Callable, Optional, Protocol

from cookit import nullcontext
from httpx import AsyncClient
from nonebot import logger
from nonebot.adapters.telegram.exception import TelegramAdapterException

from .config import config
from .consts import STICKER_SET_LINK_TEMPLATE
from .draw import make_sticker_image
from .models import ConvertResult, FailedUpload, PackMetadata, PreparedSticker
from .source_fetch import create_client, fetch_bytes, fetch_pack_metadata
from .utils import format_error, make_sticker_set_name


class EmptyPackError(IndexError):
    pass


class ProgressReporter(Protocol):
    async def send(self, text: str) -> int: ...

    async def edit(self, message_id: int, text: str) -> None: ...


class StickerSetPublisher(Protocol):
    async def create_new_sticker_set(
        self,
        user_id: int,
        name: str,
        title: str,
        stickers: list[PreparedSticker],
    ) -> None: ...

    async def add_sticker_to_set(
        self,
        user_id: int,
        name: str,
        sticker: PreparedSticker,
    ) -> None: ...


def format_progress(action: str, done: int, total: int) -> str:
    return f"{action} 중... <b>({done}/{total})</b>"


async def prepare_stickers(
    meta: PackMetadata,
    reporter: ProgressReporter,
    cli: AsyncClient,
    size: int,
    emoji: str,
) -> list[PreparedSticker]:
    total = len(meta.thumbnail_urls)
    message_id = await reporter.send(format_progress("다운로드", 0, total))

    stickers: list[PreparedSticker] = []
    for i, url in enumerate(meta.thumbnail_urls, 1):
        logger.debug(f"Downloading sticker {i}/{total} from {url}")
        data = await fetch_bytes(url, cli)
        stickers.append(
            PreparedSticker(data=make_sticker_image(data, size), emoji_list=[emoji]),
        )
        await reporter.edit(message_id, format_progress("다운로드", i, total))
    return stickers


async def publish_stickers(
    title: str,
    stickers: list[PreparedSticker],
    owner_id: int,
    set_name: str,
    publisher: StickerSetPublisher,
    reporter: ProgressReporter,
) -> list[FailedUpload]:
    """Create the set from the first sticker, then add the rest one by one.

    A failed set creation is raised only after every remaining sticker has
    been tried, the same order the upload progress message shows.
    Failures of single additions are collected and returned instead.
    """

    if not stickers:
        raise EmptyPackError(f"Pack `{title}` has no stickers to upload")

    total = len(stickers)
    await reporter.send(
        f"총 <b>{total}</b> 개의 이모티콘을 텔레그램 서버로 업로드합니다.",
    )
    message_id = await reporter.send(format_progress("업로드", 0, total))

    create_exc: Optional[Exception] = None
    try:
        await publisher.create_new_sticker_set(
            owner_id,
            set_name,
            title,
            [stickers[0]],
        )
    except TelegramAdapterException as e:
        create_exc = e
    else:
        logger.info(f"Created sticker set `{set_name}` for user {owner_id}")
    await reporter.edit(message_id, format_progress("업로드", 1, total))

    failed: list[FailedUpload] = []
    for i, sticker in enumerate(stickers[1:], 2):
        try:
            await publisher.add_sticker_to_set(owner_id, set_name, sticker)
        except TelegramAdapterException as e:
            logger.warning(
                f"Failed to add sticker {i}/{total} to `{set_name}`"
                f": {format_error(e)}",
            )
            logger.opt(exception=e).debug("Stacktrace")
            failed.append(FailedUpload(index=i, reason=format_error(e)))
        await reporter.edit(message_id, format_progress("업로드", i, total))

    if create_exc:
        raise create_exc
    return failed


async def convert_pack(
    pack_url: str,
    owner_id: int,
    bot_username: str,
    publisher: StickerSetPublisher,
    reporter: ProgressReporter,
    cli: Optional[AsyncClient] = None,
    size: Optional[int] = None,
    emoji: Optional[str] = None,
    make_set_name: Callable[[str], str] = make_sticker_set_name,
) -> ConvertResult:
    size = config.sticker_size if size is None else size
    emoji = config.default_emoji if emoji is None else emoji

    ctx = create_client() if cli is None else nullcontext(cli)
    async with ctx as ctx_cli:
        meta = await fetch_pack_metadata(pack_url, ctx_cli)
        escaped_title = escape(meta.title)
        await reporter.send(f"<b>{escaped_title}</b> 이모티콘을 다운로드 합니다.")
        stickers = await prepare_stickers(meta, reporter, ctx_cli, size, emoji)

    set_name = make_set_name(bot_username)
    failed = await publish_stickers(
        meta.title,
        stickers,
        owner_id,
        set_name,
        publisher,
        reporter,
    )

    link = STICKER_SET_LINK_TEMPLATE.format(name=set_name)
    text = f"<b>{escaped_title}</b> 스티커 생성이 완료되었습니다!\n{link}"
    if failed:
        text += f"\n<b>{len(failed)}</b> 개의 이모티콘 업로드에 실패했습니다."
    await reporter.send(text)

    return ConvertResult(
        set_name=set_name,
        title=meta.title,
        link=link,
        total=len(stickers),
        failed=failed,
    )
