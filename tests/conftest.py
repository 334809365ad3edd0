from pathlib import Path
from typing import Dict, List, Tuple

import httpx
import pytest


FIXTURES = Path(__file__).parent / "fixtures"
ORIGIN = "https://www.amroutes.org"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


# url -> (status, fixture file)
SITE: Dict[str, Tuple[int, str]] = {
    f"{ORIGIN}/": (200, "root.html"),
    f"{ORIGIN}/2025-archive": (200, "year_2025.html"),
    f"{ORIGIN}/2024-archive": (200, "year_2024.html"),
    f"{ORIGIN}/2025/dec": (200, "month_2025_dec.html"),
    f"{ORIGIN}/2025/jun": (200, "month_2025_jun.html"),
    f"{ORIGIN}/2025/jan": (200, "empty.html"),
    f"{ORIGIN}/2024/nov": (200, "month_2024_nov.html"),
    f"{ORIGIN}/episodes/205": (200, "episode_205.html"),
    f"{ORIGIN}/episodes/101": (200, "episode_101.html"),
    f"{ORIGIN}/episodes/special": (200, "episode_special.html"),
    f"{ORIGIN}/episodes/7": (200, "episode_7.html"),
    f"{ORIGIN}/episodes/50": (500, "empty.html"),
}


class FakeSite:
    """Serves the fixture site through httpx.MockTransport and records requests."""

    def __init__(self, overrides: Dict[str, Tuple[int, str]] = None) -> None:
        self.pages = dict(SITE)
        self.pages.update(overrides or {})
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, name = self.pages.get(str(request.url), (404, "empty.html"))
        return httpx.Response(status, text=read_fixture(name))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_site() -> FakeSite:
    return FakeSite()
