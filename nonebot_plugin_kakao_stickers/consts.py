import re

NAME = "Kakao Stickers"
DESCRIPTION = "카카오톡 웹 이모티콘을 텔레그램 스티커 세트로 변환"
AUTHOR = "LgCookie"

PACK_URL_REGEX = re.compile(r"https://e\.kakao\.com/t/(?P<token>[^/?#\s]+)")
METADATA_API_BASE = "https://e.kakao.com/api/v1/items/t"

# letters, digits and single underscores, starting with a letter
STICKER_SET_NAME_REGEX = re.compile(r"(?!.*__)[A-Za-z][A-Za-z0-9_]{0,63}")
STICKER_SET_LINK_TEMPLATE = "https://t.me/addstickers/{name}"
STICKER_FORMAT = "static"
