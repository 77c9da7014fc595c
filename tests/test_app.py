import logging

import pytest

from color_picker.app import create_app


@pytest.fixture
def client():
    return create_app({"TESTING": True}).test_client()


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_json()
    assert len(body["anchors"]) == 11
    assert len(body["gradient"]) == 21
    assert body["width"] == 358.0
    assert body["title"] == "Цвет"


def test_gradient(client):
    res = client.get("/gradient")
    colors = res.get_json()
    assert colors[0] == "FFFFFF"
    assert colors[-1] == "000000"


def test_color_sampling(client):
    assert client.get("/color?x=0").get_json() == {"index": 0, "hex": "FFFFFF"}
    assert client.get("/color?x=5000").get_json() == {"index": 20, "hex": "000000"}
    assert client.get("/color?x=-3").get_json()["index"] == 0


def test_color_width_override(client):
    body = client.get("/color?x=50&width=100").get_json()
    assert body["index"] == 10


@pytest.mark.parametrize(
    "query", ["/color", "/color?x=abc", "/color?x=5&width=0", "/color?x=5&width=-2"]
)
def test_color_bad_request(client, query):
    res = client.get(query)
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_hex_decode(client):
    body = client.get("/hex/FF8000").get_json()
    assert body["hex"] == "FF8000"
    assert body["red"] == 1.0
    assert body["blue"] == 0.0
    assert body["alpha"] == 1.0


def test_swatch(client):
    body = client.get("/swatch?color=red&brightness=0").get_json()
    assert body == {"color": "FF0000", "brightness": 0.0, "swatch": "FFFFFF"}
    body = client.get("/swatch?color=%23336699").get_json()
    assert body["swatch"] == "336699"


def test_swatch_bad_color(client):
    assert client.get("/swatch?color=nope-nope").status_code == 400


def test_strip(client):
    res = client.get("/strip?width=3")
    assert res.status_code == 200
    assert len(res.get_json()) == 3


@pytest.mark.parametrize("width", ["0", "99999", "wide"])
def test_strip_bad_width(client, width):
    assert client.get(f"/strip?width={width}").status_code == 400


def test_config_override():
    app = create_app(
        {"TESTING": True, "PICKER_SCREEN_WIDTH": 100, "PICKER_HORIZONTAL_PADDING": 0}
    )
    body = app.test_client().get("/").get_json()
    assert body["width"] == 100.0


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("COLOR_PICKER_PICKER_TITLE", '"Colour"')
    app = create_app({"TESTING": True})
    assert app.test_client().get("/").get_json()["title"] == "Colour"


def test_swatch_nan_brightness(client):
    res = client.get("/swatch?color=red&brightness=nan")
    assert res.status_code == 400
    assert "brightness" in res.get_json()["error"]


def test_unexpected_error_is_logged(caplog):
    app = create_app()

    @app.route("/explode")
    def explode():
        raise RuntimeError("kaboom")

    with caplog.at_level(logging.ERROR, logger="color_picker.app"):
        res = app.test_client().get("/explode")
    assert res.status_code == 500
    assert res.get_json() == {"error": "kaboom"}
    records = [r for r in caplog.records if r.name == "color_picker.app"]
    assert records and records[-1].exc_info is not None
    assert records[-1].exc_info[0] is RuntimeError
