"""Tests for the FastAPI static asset mount."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from form_slug import SlugSettings
from form_slug.web import mount_static


def test_mount_serves_client_script():
    app = FastAPI()
    script_url = mount_static(app)

    client = TestClient(app)
    response = client.get(script_url)

    assert script_url == "/form-slug/form-slug.js"
    assert response.status_code == 200
    assert "data-ipub-forms-slug" in response.text


def test_mount_path_from_settings():
    app = FastAPI()
    script_url = mount_static(app, settings=SlugSettings(static_url="/assets/slug/"))

    assert script_url == "/assets/slug/form-slug.js"
    assert TestClient(app).get(script_url).status_code == 200


def test_missing_asset_is_404():
    app = FastAPI()
    mount_static(app)

    assert TestClient(app).get("/form-slug/missing.js").status_code == 404


def test_script_looks_up_toggle_box_outside_wrapper():
    app = FastAPI()
    script_url = mount_static(app)

    script = TestClient(app).get(script_url).text

    assert "wrapper.querySelector(toggle) || document.querySelector(toggle)" in script
