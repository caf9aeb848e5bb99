import logging
from urllib.parse import urlparse

import pytest

from portfolio.state import AppState, SecretPackage


def _view(soup, client, path="/"):
    s = soup(client.get(path).data)
    return {
        "terrain": s.select_one("#terrain")["class"],
        "content": s.select_one("div.container.mt-2") is not None,
        "checked": s.select_one("input#toggle_cool").has_attr("checked"),
        "links_hidden": s.select_one("ul.navbar-nav").has_attr("hidden"),
    }


@pytest.mark.buttons
def test_app_state_toggle_round_trip():
    s = AppState()
    assert s.secret is False
    assert s.toggle_secret() is True
    assert s.toggle_secret() is False
    assert s == AppState()


@pytest.mark.buttons
def test_initial_view(client, soup):
    v = _view(soup, client)
    assert v["terrain"] == ["secret"]
    assert v["content"] is True
    assert v["checked"] is False
    assert v["links_hidden"] is False


@pytest.mark.buttons
def test_toggle_hides_content_and_shows_terrain(client, soup):
    r = client.post("/secret", data={"next": "/about"})
    assert r.status_code == 302
    assert urlparse(r.headers["Location"]).path == "/about"

    v = _view(soup, client, "/about")
    assert v["terrain"] == ["show", "secret"]
    assert v["content"] is False
    assert v["checked"] is True
    assert v["links_hidden"] is True

    s = soup(client.get("/about").data)
    assert "bg-dark" in s.select_one("nav")["class"]
    assert s.select_one("button.navbar-toggler").has_attr("hidden")


@pytest.mark.buttons
def test_toggle_twice_restores_view(client, soup):
    before = _view(soup, client, "/projects")
    client.post("/secret", data={"next": "/projects"})
    client.post("/secret", data={"next": "/projects"})
    assert _view(soup, client, "/projects") == before


@pytest.mark.buttons
def test_each_post_toggles_exactly_once(client):
    for expected in (True, False, True):
        client.post("/secret")
        assert client.get("/secret").json == {"secret": expected}


@pytest.mark.buttons
def test_status_endpoint_starts_false(client):
    r = client.get("/secret")
    assert r.status_code == 200
    assert r.json == {"secret": False}


@pytest.mark.buttons
@pytest.mark.parametrize("target", [
    None, "", "https://evil.example/", "//evil.example", "/\\evil",
    "/\t/evil.example", "/\n/evil.example", "/\x7f/evil.example", "projects",
])
def test_toggle_only_redirects_locally(client, target):
    data = {} if target is None else {"next": target}
    r = client.post("/secret", data=data)
    loc = urlparse(r.headers["Location"])
    assert loc.path == "/"
    assert loc.netloc in ("", "localhost")


@pytest.mark.buttons
def test_toggle_is_logged(client, caplog):
    caplog.set_level(logging.INFO)
    client.post("/secret")
    assert "secret toggled: True" in caplog.text
    client.post("/secret")
    assert "secret toggled: False" in caplog.text


@pytest.mark.buttons
def test_switch_posts_to_toggler(client, soup):
    s = soup(client.get("/contributions").data)
    form = s.select_one("input#toggle_cool").find_parent("form")
    assert form["method"] == "post"
    assert form["action"] == "/secret"
    assert form.select_one('input[name="next"]')["value"] == "/contributions"


@pytest.mark.buttons
def test_secret_package_is_a_value():
    a = SecretPackage(activated=True, toggler="/secret")
    assert a == SecretPackage(activated=True, toggler="/secret")
    assert a != SecretPackage(activated=False, toggler="/secret")


@pytest.mark.buttons
@pytest.mark.parametrize("target", ["/projects", "/about?tab=1", "/404"])
def test_toggle_follows_local_paths(client, target):
    r = client.post("/secret", data={"next": target})
    assert r.status_code == 302
    loc = urlparse(r.headers["Location"])
    assert loc.netloc in ("", "localhost")
    assert loc.path + ("?" + loc.query if loc.query else "") == target
