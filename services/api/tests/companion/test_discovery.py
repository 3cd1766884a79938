"""
Traveler discovery.

The visibility gate (discoverable, not the requester) holds for every query;
location and interests narrow the result and combine with AND.
"""

from services.api.companion.discovery import build_discovery_query, find_travelers
from services.api.companion.schemas import FindTravelersInput
from services.api.tests.helpers.factories import seed_user


class TestVisibilityGate:
    async def test_paris_scenario(self, session):
        a = await seed_user(session, location="Paris", is_discoverable=True)
        b = await seed_user(session, location="Paris", is_discoverable=True)
        await seed_user(session, location="Paris", is_discoverable=False)

        travelers = await find_travelers(session, FindTravelersInput(user_id=a.id, location="Paris"))

        assert [t.id for t in travelers] == [b.id]

    async def test_requester_never_returned(self, session):
        a = await seed_user(session, is_discoverable=True, interests=["food"])

        travelers = await find_travelers(session, FindTravelersInput(user_id=a.id, interests=["food"]))

        assert travelers == []

    async def test_no_filters_returns_all_discoverable_others(self, session):
        me = await seed_user(session)
        visible = [await seed_user(session, is_discoverable=True) for _ in range(3)]
        await seed_user(session, is_discoverable=False)

        travelers = await find_travelers(session, FindTravelersInput(user_id=me.id))

        assert [t.id for t in travelers] == sorted(v.id for v in visible)


class TestFilters:
    async def test_interest_overlap(self, session):
        me = await seed_user(session)
        hiker = await seed_user(session, is_discoverable=True, interests=["hiking", "photography"])
        foodie = await seed_user(session, is_discoverable=True, interests=["food"])
        await seed_user(session, is_discoverable=True, interests=["museums"])
        await seed_user(session, is_discoverable=True, interests=[])

        travelers = await find_travelers(
            session, FindTravelersInput(user_id=me.id, interests=["food", "hiking"])
        )

        assert sorted(t.id for t in travelers) == sorted([hiker.id, foodie.id])

    async def test_location_and_interests_are_anded(self, session):
        me = await seed_user(session)
        match = await seed_user(session, is_discoverable=True, location="Kyoto", interests=["temples"])
        await seed_user(session, is_discoverable=True, location="Osaka", interests=["temples"])
        await seed_user(session, is_discoverable=True, location="Kyoto", interests=["nightlife"])

        travelers = await find_travelers(
            session, FindTravelersInput(user_id=me.id, location="Kyoto", interests=["temples"])
        )

        assert [t.id for t in travelers] == [match.id]

    async def test_location_is_exact_match(self, session):
        me = await seed_user(session)
        await seed_user(session, is_discoverable=True, location="Paris, TX")

        travelers = await find_travelers(session, FindTravelersInput(user_id=me.id, location="Paris"))

        assert travelers == []

    async def test_empty_filters_are_ignored(self, session):
        me = await seed_user(session)
        other = await seed_user(session, is_discoverable=True, location="Oslo")

        travelers = await find_travelers(
            session, FindTravelersInput(user_id=me.id, location="", interests=[])
        )

        assert [t.id for t in travelers] == [other.id]

    async def test_limit_caps_results(self, session):
        me = await seed_user(session)
        visible = [await seed_user(session, is_discoverable=True) for _ in range(5)]

        travelers = await find_travelers(session, FindTravelersInput(user_id=me.id, limit=2))

        assert [t.id for t in travelers] == sorted(v.id for v in visible)[:2]

    async def test_limit_never_admits_hidden_users(self, session):
        me = await seed_user(session)
        for _ in range(3):
            await seed_user(session, is_discoverable=False)

        travelers = await find_travelers(session, FindTravelersInput(user_id=me.id, limit=10))

        assert travelers == []


class TestBuildDiscoveryQuery:
    def test_gate_present_without_filters(self):
        sql = str(build_discovery_query(FindTravelersInput(user_id="u1")))
        assert "users.id !=" in sql
        assert "users.is_discoverable IS" in sql
        assert "json_each" not in sql

    def test_interest_filter_rendered(self):
        sql = str(build_discovery_query(FindTravelersInput(user_id="u1", interests=["food"])))
        assert "json_each(users.interests)" in sql
