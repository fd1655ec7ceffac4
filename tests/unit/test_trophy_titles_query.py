"""Unit tests for the fluent trophy titles query."""

import httpx
import pytest

from adapters.psn.trophy_titles import TrophyTitlesIterator
from core.domain.language import Language
from core.domain.platform import Platform
from core.domain.tristate import TriState
from core.errors import ErrorCode, MissingPlatformError, NoTrophiesError
from core.services.filters import TrophyTitleHasGroupsFilter, TrophyTitleNameFilter
from core.services.trophy_titles import TrophyTitlesQuery


class TestConfiguration:
    """Chained configuration calls store state and never touch the network."""

    def test_chained_calls_return_same_builder(self, make_api, make_user):
        api = make_api([])
        query = make_user(api).trophy_titles()

        assert query.platforms(Platform.PS4) is query
        assert query.with_name("Horizon") is query
        assert query.has_trophy_groups() is query
        assert query.with_language(Language.FRENCH) is query
        assert api.pages_served == 0

    def test_platforms_replace_previous_call(self, make_api, make_user):
        query = make_user(make_api([])).trophy_titles()

        query.platforms(Platform.PS4, Platform.PSVITA).platforms(Platform.PS5)

        assert query.get_platforms() == (Platform.PS5,)

    def test_language_defaults_to_english(self, make_api, make_user):
        query = make_user(make_api([])).trophy_titles()

        assert query.get_language() is Language.ENGLISH
        assert query.with_language(Language.JAPANESE).get_language() is Language.JAPANESE

    def test_user_settings_reach_query(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        user = make_user(api)

        titles = list(user.trophy_titles().platforms(Platform.PS4))

        assert len(titles) == 3
        assert [r.url.params["limit"] for r in api.requests] == ["2", "2"]

    def test_explicit_settings_override_user_settings(self, make_api, make_user, settings, horizon_titles):
        api = make_api(horizon_titles)
        wide = settings.model_copy(update={"page_size": 10})

        list(make_user(api).trophy_titles(wide).platforms(Platform.PS4))

        assert api.pages_served == 1
        assert api.requests[0].url.params["limit"] == "10"

    def test_default_language_setting_does_not_change_library_language(
        self, make_api, make_user, settings, horizon_titles
    ):
        api = make_api(horizon_titles)
        french = settings.model_copy(update={"default_language": Language.FRENCH})

        query = make_user(api).trophy_titles(french).platforms(Platform.PS4)
        query.first()

        assert query.get_language() is Language.ENGLISH
        assert api.requests[0].url.params["npLanguage"] == Language.ENGLISH.value

    def test_get_user_returns_owner(self, make_api, make_user):
        user = make_user(make_api([]))

        assert user.trophy_titles().get_user() is user

    def test_has_trophy_groups_defaults_to_true(self, make_api, make_user):
        query = make_user(make_api([])).trophy_titles().platforms(Platform.PS4)

        assert query.request().has_trophy_groups is TriState.UNSET
        query.has_trophy_groups()
        assert query.request().has_trophy_groups is TriState.TRUE
        query.has_trophy_groups(False)
        assert query.request().has_trophy_groups is TriState.FALSE


class TestIterate:
    """Composition of the base source and the filter decorators."""

    def test_missing_platforms_raises_before_any_request(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        query = make_user(api).trophy_titles().with_name("Horizon")

        with pytest.raises(MissingPlatformError) as exc_info:
            query.iterate()

        assert exc_info.value.error_code is ErrorCode.CONFIG_MISSING
        assert api.pages_served == 0

    def test_empty_platforms_call_still_missing(self, make_api, make_user):
        api = make_api([])
        query = make_user(api).trophy_titles().platforms()

        with pytest.raises(MissingPlatformError):
            list(query)
        assert api.pages_served == 0

    def test_no_filters_returns_base_source(self, make_api, make_user, horizon_titles):
        query = make_user(make_api(horizon_titles)).trophy_titles().platforms(Platform.PS4)

        iterator = query.iterate()

        assert isinstance(iterator, TrophyTitlesIterator)
        assert [t.name for t in iterator] == [
            "Horizon Zero Dawn",
            "Call of Duty",
            "Horizon Forbidden West",
        ]

    def test_iterate_does_not_fetch_until_pulled(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        iterator = make_user(api).trophy_titles().platforms(Platform.PS4).iterate()

        assert api.pages_served == 0
        next(iterator)
        assert api.pages_served == 1

    def test_filters_wrap_in_fixed_order(self, make_api, make_user):
        query = (
            make_user(make_api([]))
            .trophy_titles()
            .platforms(Platform.PS4)
            .has_trophy_groups(False)
            .with_name("Horizon")
        )

        outer = query.iterate()

        assert isinstance(outer, TrophyTitleHasGroupsFilter)
        assert isinstance(outer.inner, TrophyTitleNameFilter)
        assert isinstance(outer.inner.inner, TrophyTitlesIterator)

    def test_empty_name_means_no_name_filter(self, make_api, make_user):
        query = make_user(make_api([])).trophy_titles().platforms(Platform.PS4).with_name("")

        assert isinstance(query.iterate(), TrophyTitlesIterator)

    def test_horizon_example(self, make_api, make_user, horizon_titles):
        query = make_user(make_api(horizon_titles)).trophy_titles().platforms(Platform.PS4).with_name("Horizon")

        assert [t.name for t in query] == ["Horizon Zero Dawn", "Horizon Forbidden West"]

    def test_has_groups_false_is_not_unset(self, make_api, make_user, horizon_titles):
        query = make_user(make_api(horizon_titles)).trophy_titles().platforms(Platform.PS4)

        assert len(list(query)) == 3
        assert [t.name for t in query.has_trophy_groups(False)] == [
            "Call of Duty",
            "Horizon Forbidden West",
        ]

    def test_filters_compose_as_intersection(self, make_api, make_user, make_title):
        titles = [
            make_title("Horizon Zero Dawn", groups=True),
            make_title("Horizon Chase", groups=False),
            make_title("Bloodborne", groups=True),
            make_title("Horizon Forbidden West", groups=True),
            make_title("Astro Bot", groups=False),
        ]
        user = make_user(make_api(titles))

        by_name = user.trophy_titles().platforms(Platform.PS4).with_name("Horizon")
        by_groups = user.trophy_titles().platforms(Platform.PS4).has_trophy_groups()
        both = list(user.trophy_titles().platforms(Platform.PS4).with_name("Horizon").has_trophy_groups())

        name_ids = {t.np_communication_id for t in by_name}
        group_ids = {t.np_communication_id for t in by_groups}
        assert [t.name for t in both] == ["Horizon Zero Dawn", "Horizon Forbidden West"]
        assert {t.np_communication_id for t in both} == name_ids & group_ids

    def test_case_insensitive_name_filter(self, make_api, make_user, horizon_titles):
        query = make_user(make_api(horizon_titles)).trophy_titles().platforms(Platform.PS4)

        assert list(query.with_name("horizon")) == []
        assert len(list(query.with_name("horizon", case_sensitive=False))) == 2

    def test_each_iterate_fetches_again(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        query = make_user(api).trophy_titles().platforms(Platform.PS4)

        first_run = list(query.iterate())
        pages_after_first = api.pages_served
        second_run = list(query.iterate())

        assert pages_after_first == 2
        assert api.pages_served == 4
        assert [t.name for t in first_run] == [t.name for t in second_run]

    def test_iterator_keeps_snapshot_after_reconfiguration(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        query = make_user(api).trophy_titles().platforms(Platform.PS4)

        iterator = query.iterate()
        query.platforms(Platform.PS5)
        next(iterator)

        assert api.requests[0].url.params["platform"] == "PS4"

    def test_request_parameters(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        query = (
            make_user(api, online_id="someone")
            .trophy_titles()
            .platforms(Platform.PS4, Platform.PSVITA)
            .with_language(Language.SPANISH)
        )

        next(query.iterate())

        request = api.requests[0]
        assert request.url.path == "/trophy/v1/trophyTitles"
        assert request.url.params["platform"] == "PS4,PSVITA"
        assert request.url.params["npLanguage"] == "es"
        assert request.url.params["comparedUser"] == "someone"
        assert request.url.params["offset"] == "0"
        assert request.url.params["limit"] == "2"
        assert request.headers["Authorization"] == "Bearer test-token"

    def test_transport_error_propagates_midway(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles, fail_on_offset=2)
        iterator = make_user(api).trophy_titles().platforms(Platform.PS4).iterate()

        received = [next(iterator).name, next(iterator).name]
        with pytest.raises(httpx.HTTPStatusError):
            next(iterator)

        assert received == ["Horizon Zero Dawn", "Call of Duty"]


class TestFirst:
    """`first()` pulls a single element and translates emptiness only."""

    def test_returns_first_title_with_one_page(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)

        title = make_user(api).trophy_titles().platforms(Platform.PS4).first()

        assert title.name == "Horizon Zero Dawn"
        assert api.pages_served == 1

    def test_skips_rejected_titles(self, make_api, make_user, horizon_titles):
        query = make_user(make_api(horizon_titles)).trophy_titles().platforms(Platform.PS4).has_trophy_groups(False)

        assert query.first().name == "Call of Duty"

    def test_no_titles_raises_no_trophies(self, make_api, make_user):
        query = make_user(make_api([])).trophy_titles().platforms(Platform.PS4)

        with pytest.raises(NoTrophiesError) as exc_info:
            query.first()

        assert exc_info.value.error_code is ErrorCode.NO_RESULTS

    def test_filters_rejecting_everything_raise_no_trophies(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles)
        query = make_user(api).trophy_titles().platforms(Platform.PS4).with_name("Uncharted")

        with pytest.raises(NoTrophiesError):
            query.first()
        assert api.pages_served == 2

    def test_pulls_only_the_pages_it_needs(self, make_api, make_user, make_title, settings):
        titles = [
            make_title("Base 1", groups=False),
            make_title("Base 2", groups=False),
            make_title("Base 3", groups=False),
            make_title("Expansion 1", groups=True),
            make_title("Expansion 2", groups=True),
            make_title("Expansion 3", groups=True),
        ]
        api = make_api(titles)
        query = TrophyTitlesQuery(make_user(api), settings=settings).platforms(Platform.PS4).has_trophy_groups()

        title = query.first()

        assert title.name == "Expansion 1"
        assert api.pages_served == 2
        assert [r.url.params["offset"] for r in api.requests] == ["0", "2"]

    def test_transport_error_is_not_reclassified(self, make_api, make_user, horizon_titles):
        api = make_api(horizon_titles, fail_on_offset=0, status_code=401)
        query = make_user(api).trophy_titles().platforms(Platform.PS4)

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            query.first()

        assert exc_info.value.response.status_code == 401

    def test_missing_platforms(self, make_api, make_user):
        api = make_api([])

        with pytest.raises(MissingPlatformError):
            make_user(api).trophy_titles().first()
        assert api.pages_served == 0


class TestStandaloneUser:
    """The builder only needs something shaped like a user."""

    def test_accepts_any_user_like_object(self, settings, make_api, horizon_titles):
        api = make_api(horizon_titles)

        class StubUser:
            online_id = "stub"

            def __init__(self):
                self.client = httpx.Client(
                    base_url=settings.api_base_url,
                    transport=httpx.MockTransport(api),
                )

            def get_http_client(self):
                return self.client

        query = TrophyTitlesQuery(StubUser(), settings=settings).platforms(Platform.PS4)

        assert query.first().name == "Horizon Zero Dawn"
        assert api.requests[0].url.params["comparedUser"] == "stub"
