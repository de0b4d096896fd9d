from typing import Optional

from cookit import copy_func_arg_annotations, nullcontext
from cookit.pyd import type_validate_json
from httpx import AsyncClient, Timeout
from nonebot import logger
from yarl import URL

from .config import config
from .consts import METADATA_API_BASE, PACK_URL_REGEX
from .models import PackMetadata, PackMetadataResponse


@copy_func_arg_annotations(AsyncClient)
def create_client(**kwargs):
    return AsyncClient(
        **{
            "proxy": config.proxy,
            "follow_redirects": True,
            "timeout": Timeout(config.request_timeout),
            **kwargs,
        },
    )


def extract_pack_token(pack_url: str) -> Optional[str]:
    if not (m := PACK_URL_REGEX.match(pack_url.strip())):
        return None
    return m["token"]


def to_metadata_url(pack_url: str) -> str:
    if not (token := extract_pack_token(pack_url)):
        raise ValueError(f"Not a pack URL: {pack_url}")
    return str(URL(METADATA_API_BASE) / token)


async def fetch_bytes(url: str, cli: Optional[AsyncClient] = None) -> bytes:
    ctx = create_client() if cli is None else nullcontext(cli)
    async with ctx as ctx_cli:
        return (await ctx_cli.get(url)).raise_for_status().content


async def fetch_pack_metadata(
    pack_url: str,
    cli: Optional[AsyncClient] = None,
) -> PackMetadata:
    url = to_metadata_url(pack_url)
    logger.debug(f"Fetching pack metadata from {url}")
    return type_validate_json(
        PackMetadataResponse,
        await fetch_bytes(url, cli),
    ).result
