"""
Running playground detection tests.
"""
import json

from playground.config import RuntimeKind
from playground.runtime import PlaygroundState, RuntimeDetector

from conftest import FakeHost

COMPOSE_LS = ["docker", "compose", "ls", "--all", "--format", "json"]
GET_NAMESPACE = ["kubectl", "get", "namespace", "gravitino-playground"]
RUNNING_PODS = [
    "kubectl", "-n", "gravitino-playground", "get", "pods",
    "--field-selector=status.phase=Running", "-o", "name",
]


def _compose_projects(*projects):
    return json.dumps([
        {"Name": name, "Status": status, "ConfigFiles": "/srv/playground/docker-compose.yaml"}
        for name, status in projects
    ])


def _kubernetes_running(host):
    host.tools.add("kubectl")
    host.respond(RUNNING_PODS, stdout="pod/gravitino-0\npod/trino-0\n")


class TestCompose:

    def test_running_project(self):
        host = FakeHost(tools={"docker"})
        host.respond(COMPOSE_LS, stdout=_compose_projects(("gravitino-playground", "running(9)")))

        assert RuntimeDetector(host).detect() == PlaygroundState(active=True, kind=RuntimeKind.COMPOSE)

    def test_exited_project_is_not_active(self):
        host = FakeHost(tools={"docker"})
        host.respond(COMPOSE_LS, stdout=_compose_projects(("gravitino-playground", "exited(9)")))

        assert RuntimeDetector(host).detect() == PlaygroundState.inactive()

    def test_other_projects_ignored(self):
        host = FakeHost(tools={"docker"})
        host.respond(COMPOSE_LS, stdout=_compose_projects(("my-app", "running(2)")))

        assert not RuntimeDetector(host).detect().active

    def test_table_output_fallback(self):
        host = FakeHost(tools={"docker"})
        host.respond(
            COMPOSE_LS,
            stdout="NAME                   STATUS       CONFIG FILES\n"
                   "gravitino-playground   running(9)   /srv/playground/docker-compose.yaml\n",
        )

        assert RuntimeDetector(host).detect().kind == RuntimeKind.COMPOSE


class TestKubernetes:

    def test_namespace_with_running_pods(self):
        host = FakeHost()
        _kubernetes_running(host)

        assert RuntimeDetector(host).detect() == PlaygroundState(active=True, kind=RuntimeKind.KUBERNETES)

    def test_missing_namespace(self):
        host = FakeHost(tools={"kubectl"})
        host.respond(GET_NAMESPACE, returncode=1, stderr='namespaces "gravitino-playground" not found')

        assert not RuntimeDetector(host).detect().active
        assert host.commands("kubectl", "-n") == []

    def test_namespace_without_running_pods(self):
        host = FakeHost(tools={"kubectl"})
        host.respond(RUNNING_PODS, stdout="")

        assert not RuntimeDetector(host).detect().active


class TestOrder:

    def test_compose_checked_first(self):
        host = FakeHost(tools={"docker"})
        host.respond(COMPOSE_LS, stdout=_compose_projects(("gravitino-playground", "running(9)")))
        _kubernetes_running(host)

        assert RuntimeDetector(host).detect().kind == RuntimeKind.COMPOSE
        assert host.commands("kubectl") == []

    def test_nothing_installed(self):
        host = FakeHost()
        assert RuntimeDetector(host).detect() == PlaygroundState.inactive()
        assert host.calls == []

    def test_detection_is_repeatable(self):
        host = FakeHost()
        _kubernetes_running(host)
        detector = RuntimeDetector(host)

        first = detector.detect()
        second = detector.detect()

        assert first == second
        assert not any(c[:2] in (["helm", "upgrade"], ["helm", "uninstall"]) for c in host.calls)
