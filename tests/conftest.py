"""Shared fixtures: a fake trophyTitles endpoint served through httpx.MockTransport."""

from typing import Any, Callable, Optional

import httpx
import pytest

from adapters.psn.user import User
from core.config import AppSettings


def title_payload(name: str, groups: bool = False, comm_id: Optional[str] = None) -> dict[str, Any]:
    return {
        "npCommunicationId": comm_id or f"NPWR_{name.replace(' ', '')[:10].upper()}_00",
        "trophyTitleName": name,
        "trophyTitleDetail": f"{name} trophy set",
        "trophyTitleIconUrl": "https://example.invalid/icon.png",
        "trophyTitlePlatfrom": "PS4",
        "hasTrophyGroups": groups,
        "definedTrophies": {"bronze": 30, "silver": 10, "gold": 4, "platinum": 1},
        "comparedUser": {
            "onlineId": "tester",
            "progress": 42,
            "earnedTrophies": {"bronze": 10, "silver": 2, "gold": 0, "platinum": 0},
            "lastUpdateDate": "2020-03-01T12:00:00Z",
        },
    }


class FakeTrophyApi:
    """Serves `titles` in pages honouring `offset`/`limit`; records every request."""

    def __init__(self, titles: list[dict[str, Any]], fail_on_offset: Optional[int] = None, status_code: int = 500):
        self.titles = titles
        self.fail_on_offset = fail_on_offset
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    @property
    def pages_served(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        offset = int(request.url.params["offset"])
        limit = int(request.url.params["limit"])
        if self.fail_on_offset is not None and offset == self.fail_on_offset:
            return httpx.Response(self.status_code, json={"error": {"code": 2240525}})
        return httpx.Response(
            200,
            json={
                "totalResults": len(self.titles),
                "offset": offset,
                "limit": limit,
                "trophyTitles": self.titles[offset : offset + limit],
            },
        )


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        page_size=2,
        access_token="test-token",
        api_base_url="https://trophy.example.invalid/trophy/v1",
    )


@pytest.fixture
def make_api() -> Callable[..., FakeTrophyApi]:
    def _make(titles: list[dict[str, Any]], **kwargs: Any) -> FakeTrophyApi:
        return FakeTrophyApi(titles, **kwargs)

    return _make


@pytest.fixture
def make_user(settings: AppSettings) -> Callable[[FakeTrophyApi], User]:
    def _make(api: FakeTrophyApi, online_id: str = "tester") -> User:
        return User.from_settings(online_id, settings, transport=httpx.MockTransport(api))

    return _make


@pytest.fixture
def horizon_titles() -> list[dict[str, Any]]:
    return [
        title_payload("Horizon Zero Dawn", groups=True, comm_id="NPWR11111_00"),
        title_payload("Call of Duty", groups=False, comm_id="NPWR22222_00"),
        title_payload("Horizon Forbidden West", groups=False, comm_id="NPWR33333_00"),
    ]


@pytest.fixture
def make_title() -> Callable[..., dict[str, Any]]:
    return title_payload
