"""Tests for the web API."""

import asyncio
import pytest
from pathlib import Path
from unittest.mock import patch

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from code_bundle.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

from code_bundle.scanner import scan_file

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

FIXTURES = Path(__file__).parent / "fixtures"
APP = (FIXTURES / "app").resolve()
DEPS = (FIXTURES / "deps").resolve()


@pytest.fixture(autouse=True)
def allowed_roots(tmp_path):
    with patch("code_bundle.web.api._ALLOWED_ROOTS", [FIXTURES.resolve(), tmp_path.resolve()]):
        yield


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_directives(client):
    res = client.post("/api/directives", json={"path": str(DEPS / "Map.js")})
    assert res.status_code == 200
    assert res.json()["tokens"] == ["Util.js", "Base.js"]


def test_directives_scans_off_event_loop(client):
    with patch("code_bundle.web.api.asyncio.to_thread", wraps=asyncio.to_thread) as to_thread:
        res = client.post("/api/directives", json={"path": str(DEPS / "Map.js")})
    assert res.status_code == 200
    to_thread.assert_called_once()
    assert to_thread.call_args.args[0] is scan_file


def test_directives_on_directory(client):
    res = client.post("/api/directives", json={"path": str(DEPS)})
    assert res.status_code == 400


def test_order(client):
    res = client.post("/api/order", json={
        "seed": [str(APP / "main.js"), str(APP / "widgets.js")],
        "root": str(DEPS),
    })
    assert res.status_code == 200
    data = res.json()
    assert data["count"] == 6
    assert data["files"][0] == str(DEPS / "Base.js")
    assert data["files"][-1] == str(APP / "main.js")


def test_order_with_first(client):
    res = client.post("/api/order", json={
        "seed": [str(APP / "widgets.js")],
        "root": str(DEPS),
        "first": ["Layer/Vector.js"],
    })
    assert res.status_code == 200
    assert str(DEPS / "Layer" / "Vector.js") in res.json()["files"]


def test_order_nonexistent_root(client):
    res = client.post("/api/order", json={"seed": [str(APP / "main.js")], "root": "/nonexistent/path"})
    assert res.status_code == 404


def test_order_empty_seed(client):
    res = client.post("/api/order", json={"seed": [], "root": str(DEPS)})
    assert res.status_code == 400


def test_order_unresolved(client, make_tree):
    root = make_tree({"a.js": "// @requires missing\n"})
    res = client.post("/api/order", json={"seed": [str(root / "a.js")], "root": str(root)})
    assert res.status_code == 422
    assert "missing" in res.json()["detail"]


def test_order_cycle(client, make_tree):
    root = make_tree({
        "X.js": "// @requires Y.js\n",
        "Y.js": "// @requires X.js\n",
    })
    res = client.post("/api/order", json={"seed": [str(root / "X.js")], "root": str(root)})
    assert res.status_code == 409
    assert "Circular dependency detected" in res.json()["detail"]


def test_bundle(client):
    res = client.post("/api/bundle", json={
        "seed": [str(APP / "widgets.js")],
        "root": str(DEPS),
    })
    assert res.status_code == 200
    content = res.json()["content"]
    assert content.index("var Base = {};") < content.index("function zoomBar")


def test_directives_outside_home(client):
    with patch("code_bundle.web.api._ALLOWED_ROOTS", [DEPS]):
        res = client.post("/api/directives", json={"path": str(APP / "main.js")})
    assert res.status_code == 403


def test_order_root_outside_home(client):
    res = client.post("/api/order", json={"seed": [str(DEPS / "Base.js")], "root": "/etc"})
    assert res.status_code == 403


def test_order_first_outside_home(client):
    res = client.post("/api/order", json={
        "seed": [str(DEPS / "Base.js")],
        "root": str(DEPS),
        "first": ["../" * 20 + "etc/hostname"],
    })
    assert res.status_code == 403


def test_bundle_dependency_outside_home(client, make_tree):
    root = make_tree({
        "proj/a.js": "// @requires ../secret.js\n",
        "secret.js": "var key = 'hunter2';\n",
    })
    with patch("code_bundle.web.api._ALLOWED_ROOTS", [root / "proj"]):
        res = client.post("/api/bundle", json={
            "seed": [str(root / "proj" / "a.js")],
            "root": str(root / "proj"),
        })
    assert res.status_code == 403
    assert "hunter2" not in res.text
