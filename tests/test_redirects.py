import pytest
import requests

from fakes import DOWNLOAD_HOST, FakeResponse, FakeSession
from nontonapi.downloads.helpers.redirects import resolve_redirect, resolve_redirects
from nontonapi.providers.config import Config
from nontonapi.providers.errors import UpstreamFetchError


def _redirect(location):
    return FakeResponse(status_code=302, headers={"Location": location})


class TestResolveRedirect:
    def test_reads_location_without_following(self, config):
        url = DOWNLOAD_HOST + "/a"
        response = _redirect("https://cdn.test/final-a.mp4")
        session = FakeSession({("GET", url): response})

        link = resolve_redirect(config, {"quality": "720p", "url": url}, session)

        assert link == {"quality": "720p", "url": "https://cdn.test/final-a.mp4"}
        (call,) = session.calls
        assert call["allow_redirects"] is False
        assert call["stream"] is True
        assert call["headers"] == {"user-agent": "test-agent", "referer": url}
        assert response.closed
        assert not response.body_read

    def test_relative_location_is_made_absolute(self, config):
        url = DOWNLOAD_HOST + "/video/dl.php?id=1"
        session = FakeSession(
            {("GET", DOWNLOAD_HOST + "/video/dl.php"): _redirect("/files/ep1-720p.mp4")}
        )

        link = resolve_redirect(config, {"quality": "720p", "url": url}, session)

        assert link == {
            "quality": "720p",
            "url": DOWNLOAD_HOST + "/files/ep1-720p.mp4",
        }

    def test_missing_location_is_none(self, config):
        url = DOWNLOAD_HOST + "/a"
        session = FakeSession({("GET", url): FakeResponse(status_code=200)})

        link = resolve_redirect(config, {"quality": "720p", "url": url}, session)

        assert link == {"quality": "720p", "url": None}

    def test_pending_link_is_not_mutated(self, config):
        url = DOWNLOAD_HOST + "/a"
        pending = {"quality": "720p", "url": url}
        session = FakeSession({("GET", url): _redirect("https://cdn.test/x")})

        resolve_redirect(config, pending, session)

        assert pending == {"quality": "720p", "url": url}

    def test_network_error(self, config):
        url = DOWNLOAD_HOST + "/a"
        session = FakeSession({("GET", url): requests.ConnectionError("reset")})

        with pytest.raises(UpstreamFetchError):
            resolve_redirect(config, {"quality": "720p", "url": url}, session)


class TestResolveRedirects:
    PENDING = [
        {"quality": "1080p", "url": DOWNLOAD_HOST + "/c"},
        {"quality": "720p", "url": DOWNLOAD_HOST + "/a"},
        {"quality": "480p", "url": DOWNLOAD_HOST + "/b"},
    ]

    def _session(self):
        return FakeSession(
            {
                ("GET", DOWNLOAD_HOST + "/c"): _redirect("https://cdn.test/c"),
                ("GET", DOWNLOAD_HOST + "/a"): _redirect("https://cdn.test/a"),
                ("GET", DOWNLOAD_HOST + "/b"): FakeResponse(status_code=200),
            }
        )

    def test_sequential_one_request_per_link(self, config):
        session = self._session()

        links = resolve_redirects(config, self.PENDING, session)

        assert links == [
            {"quality": "1080p", "url": "https://cdn.test/c"},
            {"quality": "720p", "url": "https://cdn.test/a"},
            {"quality": "480p", "url": None},
        ]
        assert [c["url"] for c in session.calls] == [p["url"] for p in self.PENDING]

    def test_parallel_keeps_order(self):
        config = Config(
            download_host=DOWNLOAD_HOST, user_agent="test-agent", redirect_workers=3
        )
        session = self._session()

        links = resolve_redirects(config, self.PENDING, session)

        assert [link["quality"] for link in links] == ["1080p", "720p", "480p"]
        assert links[0]["url"] == "https://cdn.test/c"
        assert len(session.calls) == 3

    def test_empty(self, config):
        assert resolve_redirects(config, [], FakeSession()) == []
