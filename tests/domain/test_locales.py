"""Tests for CLDR <-> BCP47 locale notation conversion."""

from __future__ import annotations

from datefmt.domain.locales import unicode_bcp47_to_cldr, unicode_cldr_to_bcp47


class TestCldrToBcp47:
    def test_root_token(self) -> None:
        assert unicode_cldr_to_bcp47("en_root") == "en-und"

    def test_language_region(self) -> None:
        assert unicode_cldr_to_bcp47("en_US") == "en-US"

    def test_bare_root(self) -> None:
        assert unicode_cldr_to_bcp47("root") == "und"

    def test_only_first_underscore(self) -> None:
        assert unicode_cldr_to_bcp47("zh_Hans_CN") == "zh-Hans_CN"

    def test_only_first_root(self) -> None:
        assert unicode_cldr_to_bcp47("root_root") == "und-root"

    def test_no_separator(self) -> None:
        assert unicode_cldr_to_bcp47("fr") == "fr"

    def test_embedded_root_is_replaced(self) -> None:
        """Not a tag parser: 'root' inside another token is still replaced."""
        assert unicode_cldr_to_bcp47("xx_Groot") == "xx-Gund"

    def test_empty(self) -> None:
        assert unicode_cldr_to_bcp47("") == ""


class TestBcp47ToCldr:
    def test_und_token(self) -> None:
        assert unicode_bcp47_to_cldr("en-und") == "en_root"

    def test_language_region(self) -> None:
        assert unicode_bcp47_to_cldr("pt-BR") == "pt_BR"

    def test_bare_und(self) -> None:
        assert unicode_bcp47_to_cldr("und") == "root"

    def test_only_first_hyphen(self) -> None:
        assert unicode_bcp47_to_cldr("zh-Hans-CN") == "zh_Hans-CN"

    def test_embedded_und_is_replaced(self) -> None:
        assert unicode_bcp47_to_cldr("sr-Latn-fund") == "sr_Latn-froot"


class TestRoundTrip:
    def test_simple_round_trip(self) -> None:
        assert unicode_bcp47_to_cldr(unicode_cldr_to_bcp47("en_root")) == "en_root"

    def test_three_subtags_round_trip(self) -> None:
        assert unicode_bcp47_to_cldr(unicode_cldr_to_bcp47("zh_Hans_CN")) == "zh_Hans_CN"
        assert unicode_cldr_to_bcp47(unicode_bcp47_to_cldr("zh-Hans-CN")) == "zh-Hans-CN"

    def test_und_in_cldr_input_is_not_inverse(self) -> None:
        """Known asymmetry: 'und' is only rewritten in the BCP47 -> CLDR direction."""
        assert unicode_bcp47_to_cldr(unicode_cldr_to_bcp47("und_Latn")) == "root_Latn"

    def test_mixed_separators_not_preserved(self) -> None:
        assert unicode_bcp47_to_cldr(unicode_cldr_to_bcp47("en-x_root")) == "en_x-root"
