import json
import threading

import requests
from requests.structures import CaseInsensitiveDict


BASE_URL = "https://anime.test/"
DOWNLOAD_HOST = "https://lokal.test"


class FakeResponse:
    def __init__(self, status_code=200, body="", headers=None, json_data=None):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        if json_data is not None:
            body = json.dumps(json_data)
        self.text = body
        self.closed = False
        self.body_read = False

    def json(self):
        self.body_read = True
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True


class FakeSession:
    """
    Records every call and answers from a route table.

    Routes map (METHOD, url-without-query) to a FakeResponse, an exception
    instance to raise, or a callable taking the call record.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self._lock = threading.Lock()

    def _dispatch(self, method, url, **kwargs):
        call = {"method": method, "url": url, **kwargs}
        with self._lock:
            self.calls.append(call)

        key = (method, url.split("?", 1)[0])
        if key not in self.routes:
            raise requests.ConnectionError(f"no route for {method} {url}")

        answer = self.routes[key]
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(call)
        return answer

    def get(self, url, **kwargs):
        return self._dispatch("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._dispatch("POST", url, **kwargs)

    def calls_to(self, method, url):
        return [
            c
            for c in self.calls
            if c["method"] == method and c["url"].split("?", 1)[0] == url
        ]


def lokal_page(encrypted=None, title=None, extra_scripts=()):
    lines = ['const PLAYER = "x";']
    if encrypted is not None:
        lines.append(f'const ENCRYPTED_PARAM = "{encrypted}";')
    if title is not None:
        lines.append(f'const TITLE_PARAM = "{title}";')
    scripts = "".join(f"<script>{s}</script>" for s in extra_scripts)
    return (
        "<html><head><script>\n"
        + "\n".join(lines)
        + "\n</script>"
        + scripts
        + "</head><body><div id='player'></div></body></html>"
    )
