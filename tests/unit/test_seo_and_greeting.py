"""Unit tests for SEO slugs and the dashboard greeting."""

import re

from sinjapan_manager.domain.entities.dashboard import greeting_for_hour
from sinjapan_manager.domain.entities.seo import fallback_slug, slug_for, slugify_title


def test_slugify_title():
    assert slugify_title("Hello World! 2026") == "hello-world-2026"
    assert slugify_title("  Tokyo   Office  Guide ") == "-tokyo-office-guide-"
    assert len(slugify_title("a" * 80)) == 50


def test_japanese_title_falls_back_to_generated_slug():
    slug = slug_for("東京で起業する方法")
    assert re.fullmatch(r"article-\d+-[a-z0-9]{6}", slug)


def test_explicit_slug_wins():
    assert slug_for("Anything", "  my-slug ") == "my-slug"
    assert slug_for("Anything", "   ") == "anything"


def test_fallback_slug_uses_timestamp():
    assert fallback_slug(1700000000000).startswith("article-1700000000000-")


def test_greeting_for_hour():
    assert greeting_for_hour(0) == "おはようございます"
    assert greeting_for_hour(11) == "おはようございます"
    assert greeting_for_hour(12) == "こんにちは"
    assert greeting_for_hour(17) == "こんにちは"
    assert greeting_for_hour(18) == "こんばんは"
    assert greeting_for_hour(23) == "こんばんは"
