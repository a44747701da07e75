"""Tests for the session click counter."""

import pytest

from roombook.services.redirector import count_click, get_click_counts, is_redirect_allowed


class TestIsRedirectAllowed:
    @pytest.mark.parametrize(
        "url", ["/rooms", "/rooms?page=2", "https://example.org/", "http://example.org/a"]
    )
    def test_allowed(self, url):
        assert is_redirect_allowed(url)

    @pytest.mark.parametrize(
        "url", ["", "rooms", "//evil.example", "/\\evil.example", "javascript:alert(1)", "ftp://example.org"]
    )
    def test_rejected(self, url):
        assert not is_redirect_allowed(url)


class TestCountClick:
    def test_first_click_starts_at_one(self):
        session: dict = {}

        assert count_click(session, "https://example.org") == 1
        assert session == {"counter": {"https://example.org": 1}}

    def test_clicks_are_counted_per_url(self):
        session: dict = {}

        count_click(session, "/a")
        count_click(session, "/a")
        count_click(session, "/b")

        assert get_click_counts(session) == {"/a": 2, "/b": 1}
