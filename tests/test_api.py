from skyboard.app import create_app
from skyboard.models import AircraftObservation, Settings
from skyboard.store import StateStore

MINUTE = 60.0
N1 = {"name": "N1", "latitude": 1.0, "longitude": 2.0, "altitude": 3.0}


def test_health(api_client) -> None:
    resp = api_client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_get_settings_default(api_client) -> None:
    resp = api_client.get("/settings")
    assert resp.status_code == 200
    assert resp.get_json() == {"show_tags": True}


def test_post_settings_then_get(api_client) -> None:
    resp = api_client.post("/settings", json={"show_tags": False})
    assert resp.status_code == 200
    assert resp.get_json() == {"show_tags": False}

    assert api_client.get("/settings").get_json() == {"show_tags": False}


def test_post_aircraft_echoes_settings(api_client, store) -> None:
    store.set_settings(Settings(show_tags=False))

    resp = api_client.post("/aircraft", json=N1)
    assert resp.status_code == 200
    assert resp.get_json() == {"show_tags": False}
    assert store.get_entry("N1").observation == AircraftObservation("N1", 1.0, 2.0, 3.0)


def test_get_aircraft_respects_visibility_window(api_client, clock) -> None:
    api_client.post("/aircraft", json=N1)

    clock.advance(5 * MINUTE)
    assert api_client.get("/aircraft").get_json() == [N1]

    clock.advance(6 * MINUTE)
    assert api_client.get("/aircraft").get_json() == []


def test_get_aircraft_empty(api_client) -> None:
    resp = api_client.get("/aircraft")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_post_aircraft_updates_in_place(api_client, store) -> None:
    api_client.post("/aircraft", json=N1)
    api_client.post("/aircraft", json={"name": "N2", "latitude": 0, "longitude": 0, "altitude": 0})
    api_client.post("/aircraft", json={"name": "N1", "latitude": 9, "longitude": 9, "altitude": 9})

    body = api_client.get("/aircraft").get_json()
    assert [item["name"] for item in body] == ["N1", "N2"]
    assert body[0] == {"name": "N1", "latitude": 9.0, "longitude": 9.0, "altitude": 9.0}
    assert len(store) == 2


def test_post_without_content_type_is_accepted(api_client) -> None:
    resp = api_client.post("/settings", data='{"show_tags": false}')
    assert resp.status_code == 200
    assert resp.get_json() == {"show_tags": False}


def test_malformed_json_is_rejected(api_client, store) -> None:
    resp = api_client.post("/aircraft", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert len(store) == 0


def test_invalid_aircraft_payload_is_rejected(api_client, store) -> None:
    resp = api_client.post("/aircraft", json={"name": "N1", "latitude": "north"})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "latitude"
    assert len(store) == 0


def test_invalid_settings_payload_leaves_settings_untouched(api_client, store) -> None:
    resp = api_client.post("/settings", json={"show_tags": "no"})
    assert resp.status_code == 400
    assert store.get_settings() == Settings(show_tags=True)


def test_unknown_path_returns_json_404(api_client) -> None:
    resp = api_client.get("/flights")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_wrong_method_returns_405(api_client) -> None:
    resp = api_client.delete("/aircraft")
    assert resp.status_code == 405


def test_status_reports_store_stats(api_client) -> None:
    api_client.post("/aircraft", json=N1)

    body = api_client.get("/status").get_json()
    assert body["store"]["aircraft_entries"] == 1
    assert body["store"]["visible_aircraft"] == 1
    assert body["server"] == {"host": "127.0.0.1", "port": 3030}


def test_apps_do_not_share_state(app_config) -> None:
    first = create_app(app_config=app_config).test_client()
    second = create_app(app_config=app_config, store=StateStore()).test_client()

    first.post("/aircraft", json=N1)

    assert len(first.get("/aircraft").get_json()) == 1
    assert second.get("/aircraft").get_json() == []


def test_default_store_uses_configured_settings(app_config) -> None:
    config = type(app_config)(
        server=app_config.server,
        store=type(app_config.store)(default_show_tags=False),
        debug=False,
    )
    client = create_app(app_config=config).test_client()
    assert client.get("/settings").get_json() == {"show_tags": False}


def test_out_of_range_integer_is_rejected(api_client, store) -> None:
    huge = "1" + "0" * 400
    body = '{"name": "N1", "latitude": %s, "longitude": 2, "altitude": 3}' % huge

    resp = api_client.post("/aircraft", data=body, content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "latitude"
    assert len(store) == 0
