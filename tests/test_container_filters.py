import pytest

from containerview.containers.filters import (
    filter_containers,
    filter_groups,
    matches_group,
    matches_text,
)
from containerview.containers.models import Container, ContainerGroup


def _container(**kwargs):
    kwargs.setdefault("id", kwargs.get("container_id") or "mo")
    return Container(**kwargs)


def test_matches_text_is_case_insensitive_on_image():
    container = _container(image="nginx:latest", container_id="abc", status="running")
    assert matches_text(container, "NGINX") is True


@pytest.mark.parametrize("query", ["web", "WEB-1", "f00d", "abc"])
def test_matches_text_checks_name_and_container_id(query):
    container = _container(name="web-1", image="abc/app", container_id="F00D", status="running")
    assert matches_text(container, query) is True


def test_matches_text_no_match():
    container = _container(name="web-1", image="nginx", container_id="abc", status="running")
    assert matches_text(container, "postgres") is False


def test_matches_text_empty_query_requires_active_container():
    assert matches_text(_container(container_id="abc", status="running"), "") is True
    assert matches_text(_container(container_id="abc"), "") is True
    assert matches_text(_container(container_id="abc", status="uninstalled"), "") is False
    assert matches_text(_container(id="placeholder", status="running"), "") is False
    assert matches_text(_container(container_id="abc", status="running"), None) is True


def test_matches_text_never_matches_uninstalled_or_unlinked():
    uninstalled = _container(image="nginx", container_id="abc", status="uninstalled")
    unlinked = _container(id="1", image="nginx", status="running")

    assert matches_text(uninstalled, "nginx") is False
    assert matches_text(unlinked, "nginx") is False
    assert matches_text(None, "") is False


def _sample_containers():
    return [
        _container(name="proxy", image="nginx", container_id="a1", status="running"),
        _container(name="db", image="postgres", container_id="a2", status="running", project="shop"),
        _container(name="cache", image="redis", container_id="a3", status="uninstalled"),
        _container(name="api", image="shop/api", container_id="a4", status="running", project="shop"),
        _container(name="worker", image="nginx-worker", container_id="a5", status="exited"),
    ]


def test_filter_containers_excludes_grouped_containers():
    result = filter_containers(_sample_containers(), False, "")
    assert [c.name for c in result] == ["proxy", "worker"]


def test_filter_containers_with_groups_keeps_order():
    result = filter_containers(_sample_containers(), True, "")
    assert [c.name for c in result] == ["proxy", "db", "api", "worker"]


@pytest.mark.parametrize("query", ["", "nginx", "shop", "a2", "POST", "zzz"])
def test_filter_containers_without_groups_is_subset(query):
    containers = _sample_containers()
    without_groups = filter_containers(containers, False, query)
    with_groups = filter_containers(containers, True, query)
    assert all(c in with_groups for c in without_groups)


def test_filter_containers_handles_missing_list():
    assert filter_containers(None, True, "") == []


def _groups():
    return [
        ContainerGroup(project="shop", containers=[_container(image="postgres", container_id="1")]),
        ContainerGroup(project="monitoring", containers=[_container(image="grafana/grafana", container_id="2")]),
    ]


def test_matches_group_by_project_or_image():
    shop, monitoring = _groups()

    assert matches_group(shop, "SHO") is True
    assert matches_group(monitoring, "grafana") is True
    assert matches_group(monitoring, "postgres") is False


def test_matches_group_ignores_members_without_image():
    group = ContainerGroup(project="misc", containers=[_container(container_id="1")])
    assert matches_group(group, "nginx") is False


def test_filter_groups_keeps_matching_groups_in_order():
    assert [g.project for g in filter_groups(_groups(), "")] == ["shop", "monitoring"]
    assert [g.project for g in filter_groups(_groups(), "graf")] == ["monitoring"]
    assert filter_groups(None, "x") == []
