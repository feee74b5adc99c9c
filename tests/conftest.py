import pytest

from fakes import BASE_URL, DOWNLOAD_HOST
from nontonapi.providers.config import Config


@pytest.fixture
def config():
    return Config(
        base_url=BASE_URL,
        download_host=DOWNLOAD_HOST,
        user_agent="test-agent",
        fingerprint="fp-test",
        timeout=5,
        redirect_workers=1,
        port=3000,
    )
