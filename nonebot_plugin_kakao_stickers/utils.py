import time
from typing import Callable

from .consts import STICKER_SET_NAME_REGEX


def format_error(e: BaseException):
    return f"{type(e).__name__}: {e}"


def is_valid_sticker_set_name(name: str, bot_username: str) -> bool:
    return bool(STICKER_SET_NAME_REGEX.fullmatch(name)) and name.endswith(
        f"_by_{bot_username}",
    )


class StickerSetNameFactory:
    """Makes `t<ns>_by_<bot>` names, never issuing the same timestamp twice."""

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self.clock = clock
        self.last_stamp = 0

    def __call__(self, bot_username: str) -> str:
        stamp = max(self.clock(), self.last_stamp + 1)
        self.last_stamp = stamp
        name = f"t{stamp}_by_{bot_username}"
        if not is_valid_sticker_set_name(name, bot_username):
            raise ValueError(f"Generated sticker set name `{name}` is not valid")
        return name


make_sticker_set_name = StickerSetNameFactory()
