import asyncio
import json
from datetime import datetime, timezone

from reworkbot.data_models.huis import Rework
from reworkbot.services.huis_api import HuisApiService, find_rework
from reworkbot.utils.exceptions import DeserializationError, TransportError

REWORKS = "/reworks/list"
PLAYER = "/player/userdata/727/5"

PLAYER_JSON = {
    "user_id": 727,
    "name": "Aireu",
    "old_pp": 9000.5,
    "new_pp_incl_bonus": 9100.25,
    "bonus_pp": 416.67,
    "weighted_acc_pp": 1500.0,
    "weighted_aim_pp": 5000.0,
    "weighted_tap_pp": 2500.0,
    "weighted_fl_pp": 0.0,
    "last_updated": "2023-10-10T12:30:00.000Z",
}


def make_service(transport, clock):
    return HuisApiService(transport, reworks_ttl=300, clock=clock)


class TestAvailability:

    def test_sentinel_body_is_available(self, transport, clock):
        transport.script("/", (200, "Cannot GET /"))
        assert asyncio.run(make_service(transport, clock).is_available()) is True

    def test_server_error_is_unavailable(self, transport, clock):
        transport.script("/", (500, "Cannot GET /"))
        assert asyncio.run(make_service(transport, clock).is_available()) is False

    def test_wrong_body_is_unavailable(self, transport, clock):
        transport.script("/", (200, "<html>maintenance</html>"))
        assert asyncio.run(make_service(transport, clock).is_available()) is False

    def test_transport_failure_is_unavailable(self, transport, clock):
        transport.script("/", TransportError("https://api.test/", "connection refused"))
        assert asyncio.run(make_service(transport, clock).is_available()) is False


class TestGetReworks:

    def test_cold_then_warm_cache(self, transport, clock):
        transport.script(REWORKS, (200, '[{"code":"A"}]'))
        service = make_service(transport, clock)

        first = asyncio.run(service.get_reworks())
        assert len(first) == 1
        assert first[0].code == "A"
        assert len(transport.calls_to(REWORKS)) == 1

        second = asyncio.run(service.get_reworks())
        assert second == first
        assert len(transport.calls_to(REWORKS)) == 1

    def test_empty_list_is_rejected(self, transport, clock):
        transport.script(REWORKS, (200, "[]"))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_empty_list_is_not_cached(self, transport, clock):
        transport.script(REWORKS, (200, "[]"), (200, '[{"code":"A"}]'))
        service = make_service(transport, clock)
        assert asyncio.run(service.get_reworks()) is None
        assert asyncio.run(service.get_reworks())[0].code == "A"
        assert len(transport.calls_to(REWORKS)) == 2

    def test_malformed_json_is_rejected(self, transport, clock):
        transport.script(REWORKS, (200, "not json"))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_non_array_is_rejected(self, transport, clock):
        transport.script(REWORKS, (200, '{"code":"A"}'))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_malformed_element_is_rejected(self, transport, clock):
        transport.script(REWORKS, (200, '[{"code":"A"}, 5]'))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_error_status_is_rejected(self, transport, clock):
        transport.script(REWORKS, (503, '[{"code":"A"}]'))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_transport_failure(self, transport, clock):
        transport.script(REWORKS, TransportError("https://api.test/reworks/list", "timed out"))
        assert asyncio.run(make_service(transport, clock).get_reworks()) is None

    def test_stale_cache_refreshes_once(self, transport, clock):
        transport.script(REWORKS, (200, '[{"code":"A"}]'), (200, '[{"code":"B"}, {"code":"C"}]'))
        service = make_service(transport, clock)
        asyncio.run(service.get_reworks())

        clock.advance(300)
        refreshed = asyncio.run(service.get_reworks())
        assert [rework.code for rework in refreshed] == ["B", "C"]
        assert len(transport.calls_to(REWORKS)) == 2

        clock.advance(299)
        assert asyncio.run(service.get_reworks()) == refreshed
        assert len(transport.calls_to(REWORKS)) == 2

    def test_stale_value_is_not_served_when_refresh_fails(self, transport, clock):
        transport.script(REWORKS, (200, '[{"code":"A"}]'), (500, "oops"))
        service = make_service(transport, clock)
        asyncio.run(service.get_reworks())

        clock.advance(301)
        assert asyncio.run(service.get_reworks()) is None

    def test_full_rework_fields(self, transport, clock):
        body = json.dumps([{
            "id": 5, "name": "Live", "code": "live", "url": "https://github.com/ppy/osu",
            "commit": "abc123", "gamemode": 0, "rework_type": "LIVE",
            "active": True, "public": True, "historic": False, "confirmed": True,
        }])
        transport.script(REWORKS, (200, body))
        rework = asyncio.run(make_service(transport, clock).get_reworks())[0]
        assert rework.id == 5
        assert rework.display_name == "Live"
        assert rework.is_active is True
        assert rework.is_historic is False


class TestGetRework:

    def test_by_code_case_insensitive(self, transport, clock):
        transport.script(REWORKS, (200, '[{"id": 1, "code": "live"}, {"id": 2, "code": "xexxar"}]'))
        rework = asyncio.run(make_service(transport, clock).get_rework("XEXXAR"))
        assert rework.id == 2

    def test_by_numeric_id(self, transport, clock):
        transport.script(REWORKS, (200, '[{"id": 1, "code": "live"}, {"id": 2, "code": "xexxar"}]'))
        assert asyncio.run(make_service(transport, clock).get_rework("2")).code == "xexxar"

    def test_unknown(self, transport, clock):
        transport.script(REWORKS, (200, '[{"id": 1, "code": "live"}]'))
        assert asyncio.run(make_service(transport, clock).get_rework("nope")) is None

    def test_reworks_unavailable(self, transport, clock):
        transport.script(REWORKS, (500, ""))
        assert asyncio.run(make_service(transport, clock).get_rework("live")) is None

    def test_lookup_reuses_cached_list(self, transport, clock):
        transport.script(REWORKS, (200, '[{"id": 1, "code": "live"}]'))
        service = make_service(transport, clock)
        reworks = asyncio.run(service.get_reworks())
        assert find_rework(reworks, " LIVE ") is reworks[0]
        assert asyncio.run(service.get_rework("1")) is reworks[0]
        assert len(transport.calls_to(REWORKS)) == 1

    def test_code_wins_over_id(self):
        reworks = [Rework(id=1, code="2"), Rework(id=2, code="other")]
        assert find_rework(reworks, "2").id == 1

    def test_find_in_empty_list(self):
        assert find_rework([], "live") is None


class TestGetPlayer:

    def test_player_snapshot(self, transport, clock):
        transport.script(PLAYER, (200, json.dumps(PLAYER_JSON)))
        player = asyncio.run(make_service(transport, clock).get_player(727, 5))

        assert player.id == 727
        assert player.name == "Aireu"
        assert player.old_pp == 9000.5
        assert player.new_pp == 9100.25
        assert player.weighted_aim_pp == 5000.0
        assert player.last_updated == datetime(2023, 10, 10, 12, 30, tzinfo=timezone.utc)
        assert abs(player.pp_difference - 99.75) < 1e-9
        assert abs(player.new_pp_excl_bonus - 8683.58) < 1e-9

    def test_nullable_pp_fields(self, transport, clock):
        data = dict(PLAYER_JSON, old_pp=None, new_pp_incl_bonus=None)
        transport.script(PLAYER, (200, json.dumps(data)))
        player = asyncio.run(make_service(transport, clock).get_player(727, 5))
        assert player.old_pp is None
        assert player.pp_difference is None
        assert player.new_pp_excl_bonus is None

    def test_always_fetches(self, transport, clock):
        transport.script(PLAYER, (200, json.dumps(PLAYER_JSON)))
        service = make_service(transport, clock)
        asyncio.run(service.get_player(727, 5))
        asyncio.run(service.get_player(727, 5))
        assert len(transport.calls_to(PLAYER)) == 2

    def test_missing_required_field(self, transport, clock):
        data = dict(PLAYER_JSON)
        del data["weighted_tap_pp"]
        transport.script(PLAYER, (200, json.dumps(data)))
        assert asyncio.run(make_service(transport, clock).get_player(727, 5)) is None

    def test_null_body(self, transport, clock):
        transport.script(PLAYER, (200, "null"))
        assert asyncio.run(make_service(transport, clock).get_player(727, 5)) is None

    def test_transport_failure(self, transport, clock):
        transport.script(PLAYER, TransportError("https://api.test/player/userdata/727/5", "timed out"))
        assert asyncio.run(make_service(transport, clock).get_player(727, 5)) is None

    def test_failure_kind_is_logged(self, transport, clock, caplog):
        transport.script(PLAYER, (200, "{broken"))
        asyncio.run(make_service(transport, clock).get_player(727, 5))
        assert "Failed to deserialize player 727 in rework 5" in caplog.text
        assert "/player/userdata/727/5" in caplog.text


def test_close_releases_transport(transport, clock):
    asyncio.run(make_service(transport, clock).close())
    assert transport.closed


def test_undecodable_body_is_logged_as_deserialization_failure(transport, clock, caplog):
    transport.script(REWORKS, DeserializationError("response body", "undecodable body from https://api.test/reworks/list"))
    assert asyncio.run(make_service(transport, clock).get_reworks()) is None
    assert "Failed to deserialize the reworks" in caplog.text
    assert "Unexpected error" not in caplog.text
