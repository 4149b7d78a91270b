"""Locale identifier notation conversion between CLDR and BCP47.

CLDR writes ``en_US`` and calls the generic locale ``root``; BCP47 writes
``en-US`` and calls it ``und``. The conversions below replace only the
first separator and the first root token. They are not tag parsers:
``zh_Hans_CN`` becomes ``zh-Hans_CN``, and the two directions are not
inverses for multi-subtag tags. Callers rely on that exact behavior.
"""

from __future__ import annotations


def unicode_cldr_to_bcp47(locale: str) -> str:
    """Convert a CLDR locale string to BCP47 notation.

    Examples:
        >>> unicode_cldr_to_bcp47("en_root")
        'en-und'
        >>> unicode_cldr_to_bcp47("zh_Hans_CN")
        'zh-Hans_CN'
    """
    return locale.replace("_", "-", 1).replace("root", "und", 1)


def unicode_bcp47_to_cldr(locale: str) -> str:
    """Convert a BCP47 locale string to CLDR notation.

    Examples:
        >>> unicode_bcp47_to_cldr("en-und")
        'en_root'
        >>> unicode_bcp47_to_cldr("zh-Hans-CN")
        'zh_Hans-CN'
    """
    return locale.replace("-", "_", 1).replace("und", "root", 1)
