"""
Status catalog.

Static lookup tables mapping a status code to its localized description,
and a status range to its localized category label and color theme.
All tables are built once at import time and never mutated.

Range checks are expressed as ordered tuples of (range, result) pairs.
The first matching range wins, so the tuple order is the priority order.
"""

from types import MappingProxyType
from typing import Mapping

from statuspage.domain.pages.entities import CategoryRange, Language, Theme

INFORMATIONAL = CategoryRange("informational", 100, 200)
SUCCESS = CategoryRange("success", 200, 300)
REDIRECTION = CategoryRange("redirection", 300, 400)
CLIENT_ERROR = CategoryRange("client_error", 400, 500)
SERVER_ERROR = CategoryRange("server_error", 500, 600)

UNKNOWN_CATEGORY = "unknown"

CATEGORY_ORDER: tuple[CategoryRange, ...] = (
    INFORMATIONAL,
    SUCCESS,
    REDIRECTION,
    CLIENT_ERROR,
    SERVER_ERROR,
)

_DESCRIPTIONS_EN: Mapping[int, str] = MappingProxyType({
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
})

_DESCRIPTIONS_ZH: Mapping[int, str] = MappingProxyType({
    400: "错误的请求",
    401: "未授权",
    402: "需要付款",
    403: "禁止访问",
    404: "未找到",
    405: "方法不被允许",
    406: "不可接受",
    407: "需要代理身份验证",
    408: "请求超时",
    409: "冲突",
    410: "已删除",
    411: "需要长度",
    412: "前置条件失败",
    413: "请求实体过大",
    414: "请求URI过长",
    415: "不支持的媒体类型",
    416: "请求范围不满足",
    417: "期望失败",
    418: "我是一个茶壶",
    421: "错误定向的请求",
    422: "无法处理的实体",
    423: "已锁定",
    424: "失败的依赖",
    425: "过早",
    426: "需要升级",
    428: "需要前置条件",
    429: "请求过多",
    431: "请求头字段过大",
    451: "因法律原因不可用",
    500: "服务器内部错误",
    501: "未实现",
    502: "网关错误",
    503: "服务不可用",
    504: "网关超时",
    505: "不支持的HTTP版本",
    506: "变体也在协商中",
    507: "存储空间不足",
    508: "检测到循环",
    510: "未扩展",
    511: "需要网络身份验证",
})

UNKNOWN_DESCRIPTION: Mapping[Language, str] = MappingProxyType({
    Language.EN: "Unknown Status Code",
    Language.ZH: "不是哥们? 你在干什么?",
})

_CATEGORY_LABELS: Mapping[Language, Mapping[str, str]] = MappingProxyType({
    Language.EN: MappingProxyType({
        "informational": "Informational",
        "success": "Success",
        "redirection": "Redirection",
        "client_error": "Client Error",
        "server_error": "Server Error",
        UNKNOWN_CATEGORY: "Unknown",
    }),
    Language.ZH: MappingProxyType({
        "informational": "信息响应",
        "success": "成功",
        "redirection": "重定向",
        "client_error": "客户端错误-你输入了正确的地址吗？",
        "server_error": "服务器错误-联系站长解决问题",
        UNKNOWN_CATEGORY: "未知",
    }),
})

# Fluent-style palettes.
DEFAULT_THEME = Theme(
    background="#f3f2f1",
    card_background="#ffffff",
    text="#201f1e",
    accent="#0078d4",
    hover="#f3f2f1",
    shadow="0 1.6px 3.6px 0 rgba(0,0,0,0.132), 0 0.3px 0.9px 0 rgba(0,0,0,0.108)",
)

CLIENT_ERROR_THEME = Theme(
    background="#fdf2f0",
    card_background="#ffffff",
    text="#a4262c",
    accent="#d13438",
    hover="#fde7e9",
    shadow=(
        "0 1.6px 3.6px 0 rgba(208, 74, 83, 0.132), "
        "0 0.3px 0.9px 0 rgba(208, 74, 83, 0.108)"
    ),
)

SERVER_ERROR_THEME = Theme(
    background="#fdf2f0",
    card_background="#ffffff",
    text="#a80000",
    accent="#d13438",
    hover="#fde7e9",
    shadow=(
        "0 1.6px 3.6px 0 rgba(208, 74, 83, 0.132), "
        "0 0.3px 0.9px 0 rgba(208, 74, 83, 0.108)"
    ),
)

REDIRECTION_THEME = Theme(
    background="#eff6fc",
    card_background="#ffffff",
    text="#003d62",
    accent="#0078d4",
    hover="#eff6fc",
    shadow=(
        "0 1.6px 3.6px 0 rgba(0, 120, 212, 0.132), "
        "0 0.3px 0.9px 0 rgba(0, 120, 212, 0.108)"
    ),
)

SUCCESS_THEME = Theme(
    background="#dff6dd",
    card_background="#ffffff",
    text="#107c10",
    accent="#107c10",
    hover="#dff6dd",
    shadow=(
        "0 1.6px 3.6px 0 rgba(16, 124, 16, 0.132), "
        "0 0.3px 0.9px 0 rgba(16, 124, 16, 0.108)"
    ),
)

INFORMATIONAL_THEME = Theme(
    background="#f3f2f1",
    card_background="#ffffff",
    text="#323130",
    accent="#605e5c",
    hover="#f3f2f1",
    shadow=(
        "0 1.6px 3.6px 0 rgba(0, 0, 0, 0.132), "
        "0 0.3px 0.9px 0 rgba(0, 0, 0, 0.108)"
    ),
)

# 4xx and 5xx share near-identical palettes and are checked first.
THEME_ORDER: tuple[tuple[CategoryRange, Theme], ...] = (
    (CLIENT_ERROR, CLIENT_ERROR_THEME),
    (SERVER_ERROR, SERVER_ERROR_THEME),
    (REDIRECTION, REDIRECTION_THEME),
    (SUCCESS, SUCCESS_THEME),
    (INFORMATIONAL, INFORMATIONAL_THEME),
)


def normalize_language(lang: str | None) -> Language:
    """Map any language value onto the closed set. Only ``en`` is English."""
    return Language.EN if lang == Language.EN else Language.ZH


def known_codes() -> tuple[int, ...]:
    """Return every status code that has a catalogued description."""
    return tuple(sorted(_DESCRIPTIONS_EN))


def description_of(code: int, lang: str | None) -> str:
    """Return the localized description of ``code``.

    Codes absent from the table get the language's unknown-status text.
    """
    language = normalize_language(lang)
    table = _DESCRIPTIONS_EN if language is Language.EN else _DESCRIPTIONS_ZH
    return table.get(code, UNKNOWN_DESCRIPTION[language])


def category_range_of(code: int) -> CategoryRange | None:
    """Return the range containing ``code``, or None outside [100, 600)."""
    for category_range in CATEGORY_ORDER:
        if category_range.contains(code):
            return category_range
    return None


def category_of(code: int, lang: str | None) -> str:
    """Return the localized category label of ``code``."""
    labels = _CATEGORY_LABELS[normalize_language(lang)]
    category_range = category_range_of(code)
    key = category_range.key if category_range is not None else UNKNOWN_CATEGORY
    return labels[key]


def theme_of(code: int) -> Theme:
    """Return the color theme for ``code``'s range, or the neutral default."""
    for category_range, theme in THEME_ORDER:
        if category_range.contains(code):
            return theme
    return DEFAULT_THEME
