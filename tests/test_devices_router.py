from fastapi import FastAPI
from fastapi.testclient import TestClient

from containerview.api.dependencies import get_container_service
from containerview.api.routers.devices import router
from containerview.containers.service import ContainerService
from containerview.exceptions import Unavailable


def _mo(mo_id, name, image, project=None, status="up"):
    return {
        "id": mo_id,
        "name": name,
        "status": status,
        "container": {"containerId": f"c{mo_id}", "image": image, "projectName": project},
    }


class FakeInventory:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error

    async def fetch_children(self, device_id, predicate, page_size=100):
        if self.error:
            raise self.error
        return self.rows[:page_size]

    async def fetch_with_parents(self, object_id):
        raise AssertionError("not used")


def _client(inventory):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_container_service] = lambda: ContainerService(inventory)
    return TestClient(app)


ROWS = [
    _mo("1", "proxy", "nginx:latest"),
    _mo("2", "shop-db", "postgres:16", project="shop"),
    _mo("3", "old", "nginx:1.0", status="uninstalled"),
    _mo("4", "shop-api", "shop/api", project="shop"),
]


def test_list_containers_excludes_grouped_and_uninstalled():
    response = _client(FakeInventory(ROWS)).get("/devices/d1/containers")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "success"
    assert [c["id"] for c in payload["data"]] == ["1"]
    assert payload["data"][0]["containerId"] == "c1"


def test_list_containers_with_groups_and_query():
    response = _client(FakeInventory(ROWS)).get(
        "/devices/d1/containers", params={"include_groups": "true", "q": "SHOP"}
    )

    assert response.status_code == 200
    assert [c["name"] for c in response.json()["data"]] == ["shop-db", "shop-api"]


def test_list_container_groups():
    response = _client(FakeInventory(ROWS)).get("/devices/d1/container-groups", params={"q": "postgres"})

    assert response.status_code == 200
    groups = response.json()["data"]
    assert [g["project"] for g in groups] == ["shop"]
    assert [c["id"] for c in groups[0]["containers"]] == ["2", "4"]


def test_device_without_containers_is_forbidden():
    client = _client(FakeInventory([]))

    assert client.get("/devices/d1/containers").status_code == 403
    assert client.get("/devices/d1/container-groups").status_code == 403
    assert client.get("/devices/d1/access").json()["data"]["visible"] is False


def test_inventory_failure_denies_access():
    client = _client(FakeInventory(error=Unavailable("connection refused")))

    response = client.get("/devices/d1/containers")
    assert response.status_code == 503
    assert client.get("/devices/d1/access").status_code == 503
