from arclet.alconna import Alconna, CommandMeta
from nonebot_plugin_alconna import on_alconna

from .shared import HELP_TEXT

m_help = on_alconna(
    Alconna("start", meta=CommandMeta(description="사용 방법")),
    aliases={"help"},
    use_cmd_start=True,
)


@m_help.handle()
async def _():
    await m_help.finish(HELP_TEXT)
