from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from containerview.api.routers.info import router


def test_version_endpoint():
    app = FastAPI()
    app.include_router(router)

    with patch("containerview.version.get_version", return_value="1.2.3"):
        response = TestClient(app).get("/info/version")

    assert response.status_code == 200
    assert response.json()["data"] == {"version": "1.2.3"}


def test_server_registers_routes():
    from containerview.api.server import app

    paths = app.openapi()["paths"]
    assert "/devices/{device_id}/containers" in paths
    assert "/devices/{device_id}/container-groups" in paths
    assert "/containers/{object_id}" in paths
    assert "/containers/{object_id}/stop" in paths
