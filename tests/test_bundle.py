"""Tests for Bundle translation, language settings and miss handling.

Python 3.13+.
"""

import logging
from unittest.mock import Mock

import pytest

from langbundle import Bundle, BundleConfig, MissPolicy, TranslateOptions
from langbundle.runtime.context import context_with_lang, language_scope


@pytest.fixture
def bundle() -> Bundle:
    """English + Chinese bundle with plain, nested and plural messages."""
    bundle = Bundle()
    bundle.load_content(
        "en",
        "json",
        b"""{
            "hello": "Hello",
            "greeting": "Hello, {{.Name}}",
            "common": {"confirm": "OK"},
            "items": {"one": "{{.Count}} item", "other": "{{.Count}} items"}
        }""",
    )
    bundle.load_messages("zh-CN", {"hello": "你好", "greeting": "你好，{{.Name}}"})
    return bundle


class TestTranslate:
    """Core translation behaviour."""

    def test_current_language(self, bundle: Bundle) -> None:
        """Without options the current language is used."""
        assert bundle.translate("hello") == "Hello"

    def test_explicit_language(self, bundle: Bundle) -> None:
        """lang selects the language, in either separator style."""
        assert bundle.translate("hello", lang="zh_CN") == "你好"
        assert bundle.t("hello", lang="zh-cn") == "你好"

    def test_fallback(self, bundle: Bundle) -> None:
        """A language without the message falls back to the fallback language."""
        assert bundle.translate("hello", lang="ja") == "Hello"

    def test_nested_id(self, bundle: Bundle) -> None:
        """Nested namespaces are addressed with dots."""
        assert bundle.translate("common.confirm") == "OK"

    def test_template_mapping(self, bundle: Bundle) -> None:
        """Mapping data fills placeholders."""
        assert bundle.translate("greeting", data={"Name": "Ada"}) == "Hello, Ada"

    def test_template_pairs(self, bundle: Bundle) -> None:
        """Pair data fills placeholders; a trailing key is ignored."""
        assert bundle.translate("greeting", lang="zh-CN", data=["Name", "小明", "x"]) == (
            "你好，小明"
        )

    @pytest.mark.parametrize(
        ("count", "expected"), [(1, "1 item"), (0, "0 items"), (5, "5 items")]
    )
    def test_plural(self, bundle: Bundle, count: int, expected: str) -> None:
        """Count selects the plural form and is rendered as Count."""
        assert bundle.translate("items", count=count) == expected

    def test_options_object(self, bundle: Bundle) -> None:
        """TranslateOptions can be passed positionally; keywords win."""
        opts = TranslateOptions(lang="zh-CN", data={"Name": "A"})
        assert bundle.translate("greeting", opts) == "你好，A"
        assert bundle.translate("greeting", opts, lang="en") == "Hello, A"


class TestLanguagePrecedence:
    """explicit lang > context language > current language."""

    def test_context_over_current(self, bundle: Bundle) -> None:
        """A context language beats the current language."""
        ctx = context_with_lang("zh-CN")
        assert bundle.translate("hello", context=ctx) == "你好"

    def test_explicit_over_context(self, bundle: Bundle) -> None:
        """An explicit language beats the context language."""
        ctx = context_with_lang("zh-CN")
        assert bundle.translate("hello", lang="en", context=ctx) == "Hello"

    def test_all_three_set(self, bundle: Bundle) -> None:
        """Current en, context zh-CN and explicit ja: the ja text wins."""
        bundle.load_messages("ja", {"hello": "こんにちは"})
        ctx = context_with_lang("zh-CN")
        assert bundle.get_lang() == "en"
        assert bundle.translate("hello", lang="ja", context=ctx) == "こんにちは"
        assert bundle.translate("hello", context=ctx) == "你好"
        assert bundle.translate("hello") == "Hello"

    def test_scope_over_current(self, bundle: Bundle) -> None:
        """A language bound with language_scope is picked up implicitly."""
        with language_scope("zh_CN"):
            assert bundle.translate("hello") == "你好"
        assert bundle.translate("hello") == "Hello"

    def test_set_lang(self, bundle: Bundle) -> None:
        """set_lang changes the current language, stored normalized."""
        bundle.set_lang("zh_CN")
        assert bundle.get_lang() == "zh-CN"
        assert bundle.translate("hello") == "你好"


class TestMissHandling:
    """Miss policy, callback and logging."""

    def test_return_id(self, bundle: Bundle) -> None:
        """Default policy returns the id."""
        assert bundle.translate("nope") == "nope"

    def test_return_empty(self) -> None:
        """RETURN_EMPTY returns an empty string."""
        bundle = Bundle(BundleConfig(miss_policy=MissPolicy.RETURN_EMPTY))
        assert bundle.translate("nope") == ""

    def test_callback_called_once(self) -> None:
        """The miss handler receives (language, id) exactly once per miss."""
        handler = Mock()
        bundle = Bundle(BundleConfig(miss_handler=handler))
        bundle.translate("nope", lang="ja")
        handler.assert_called_once_with("ja", "nope")

    def test_callback_not_called_on_hit(self) -> None:
        """Hits, including fallback hits, do not call the handler."""
        handler = Mock()
        b = Bundle(BundleConfig(miss_handler=handler))
        b.load_messages("en", {"hello": "Hello"})
        assert b.translate("hello", lang="ja") == "Hello"
        handler.assert_not_called()

    def test_logger_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """A configured logger gets one warning per miss."""
        app_logger = logging.getLogger("app.i18n")
        bundle = Bundle(BundleConfig(logger=app_logger))
        with caplog.at_level(logging.WARNING, logger="app.i18n"):
            bundle.translate("nope", lang="de")
        records = [r for r in caplog.records if r.name == "app.i18n"]
        assert len(records) == 1
        assert "nope" in records[0].getMessage()

    def test_callback_may_reenter(self) -> None:
        """The handler runs outside the lock and may load messages."""

        def handler(lang: str, message_id: str) -> None:
            bundle.load_messages(lang, {message_id: "loaded"})

        bundle = Bundle(BundleConfig(miss_handler=handler))
        assert bundle.translate("late") == "late"
        assert bundle.translate("late") == "loaded"

    def test_plural_without_other(self) -> None:
        """A plural message lacking the selected form and other is a miss."""
        bundle = Bundle()
        bundle.load_content("en", "yaml", "thing:\n  one: one thing\n")
        assert bundle.translate("thing", count=1) == "one thing"
        assert bundle.translate("thing", count=2) == "thing"


class TestLanguageSettings:
    """Default and fallback languages."""

    def test_defaults(self) -> None:
        """BundleConfig() gives en everywhere."""
        bundle = Bundle()
        assert (bundle.get_lang(), bundle.default_lang, bundle.fallback_lang) == ("en", "en", "en")

    def test_config_normalized(self) -> None:
        """Configured languages are stored normalized."""
        bundle = Bundle(BundleConfig(default_lang="zh_CN", fallback_lang="pt_BR"))
        assert bundle.get_lang() == "zh-CN"
        assert bundle.fallback_lang == "pt-BR"

    def test_set_fallback_lang(self, bundle: Bundle) -> None:
        """Changing the fallback affects subsequent lookups immediately."""
        assert bundle.translate("hello", lang="ja") == "Hello"
        bundle.set_fallback_lang("zh_CN")
        assert bundle.fallback_lang == "zh-CN"
        assert bundle.translate("hello", lang="ja") == "你好"

    def test_set_default_lang_keeps_current(self, bundle: Bundle) -> None:
        """The default language does not move the current language."""
        bundle.set_default_lang("zh-CN")
        assert bundle.default_lang == "zh-CN"
        assert bundle.get_lang() == "en"

    def test_invalid_tag_substituted(self, bundle: Bundle) -> None:
        """An unparseable language is replaced by the default language."""
        bundle.set_default_lang("zh-CN")
        assert bundle.translate("hello", lang="%%") == "你好"

    def test_languages_canonical(self) -> None:
        """languages() lists canonical tags in load order."""
        bundle = Bundle()
        bundle.load_messages("zh_cn", {"a": "A"})
        bundle.load_messages("en", {"a": "A"})
        bundle.load_messages("zh-CN", {"b": "B"})
        assert bundle.languages() == ["zh-CN", "en"]

    def test_has_message(self, bundle: Bundle) -> None:
        """has_message considers the requested and fallback languages."""
        assert bundle.has_message("hello", "ja")
        assert bundle.has_message("common.confirm")
        assert not bundle.has_message("nope")


class TestCacheInvalidation:
    """Resolver cache freshness."""

    def test_load_after_lookup(self, bundle: Bundle) -> None:
        """A message loaded after a lookup in the same language is visible."""
        assert bundle.translate("farewell", lang="ja") == "farewell"
        bundle.load_messages("ja", {"farewell": "さようなら"})
        assert bundle.translate("farewell", lang="ja") == "さようなら"

    def test_fallback_load_after_lookup(self, bundle: Bundle) -> None:
        """Loading into the fallback language is visible to cached languages."""
        assert bundle.translate("new", lang="ja") == "new"
        bundle.load_messages("en", {"new": "New"})
        assert bundle.translate("new", lang="ja") == "New"

    def test_last_write_wins(self, bundle: Bundle) -> None:
        """Reloading an id replaces its text."""
        bundle.load_messages("en", {"hello": "Hi"})
        assert bundle.translate("hello") == "Hi"

    def test_cache_stats(self, bundle: Bundle) -> None:
        """Repeated lookups hit the resolver cache."""
        bundle.translate("hello")
        bundle.translate("hello")
        stats = bundle.cache_stats()
        assert stats["hits"] >= 1
        assert stats["size"] == 1


class TestInstanceIsolation:
    """Bundles share no state."""

    def test_independent_catalogs(self) -> None:
        """Loading into one bundle does not affect another."""
        first, second = Bundle(), Bundle()
        first.load_messages("en", {"hello": "Hello"})
        assert first.translate("hello") == "Hello"
        assert second.translate("hello") == "hello"
        assert second.languages() == []

    def test_independent_settings(self) -> None:
        """Language settings are per instance."""
        first, second = Bundle(), Bundle()
        first.set_lang("ja")
        assert second.get_lang() == "en"
