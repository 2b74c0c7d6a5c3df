"""
Runtime adapter tests: command lines and log streaming.
"""
from datetime import datetime

import pytest

from playground.adapters import ADAPTERS, ComposeAdapter, KubernetesAdapter, get_adapter
from playground.config import RuntimeKind
from playground.errors import CommandFailed

from conftest import FakeHost


def test_every_runtime_has_an_adapter(config, fake_host):
    assert set(ADAPTERS) == set(RuntimeKind)
    assert isinstance(get_adapter(RuntimeKind.COMPOSE, fake_host, config), ComposeAdapter)
    assert isinstance(get_adapter(RuntimeKind.KUBERNETES, fake_host, config), KubernetesAdapter)


class TestCompose:

    def test_apply_brings_project_up(self, config, fake_host, quiet_console):
        log_path = ComposeAdapter(fake_host, config, quiet_console).apply()

        assert fake_host.calls == [["docker", "compose", "-p", "gravitino-playground", "up", "--detach"]]
        assert fake_host.spawned == [
            (["docker", "compose", "-p", "gravitino-playground", "logs", "-f"], log_path)
        ]
        assert log_path.parent == config.playground_dir
        assert log_path.name.startswith("playground-")
        assert log_path.suffix == ".log"

    def test_log_file_timestamp(self, config, fake_host, quiet_console):
        adapter = ComposeAdapter(fake_host, config, quiet_console)

        log_path = adapter.stream_logs(now=datetime(2024, 7, 1, 9, 30, 5))

        assert log_path.name == "playground-20240701093005.log"
        assert f"Check log details: {log_path}" in quiet_console.file.getvalue()

    def test_failed_up_does_not_stream(self, config, fake_host, quiet_console):
        fake_host.respond(
            ["docker", "compose", "-p", "gravitino-playground", "up", "--detach"],
            returncode=1,
            stderr="no configuration file provided",
        )

        with pytest.raises(CommandFailed):
            ComposeAdapter(fake_host, config, quiet_console).apply()

        assert fake_host.spawned == []

    def test_query_and_teardown(self, config, fake_host, quiet_console):
        adapter = ComposeAdapter(fake_host, config, quiet_console)

        adapter.query()
        adapter.teardown()

        assert fake_host.calls == [
            ["docker", "compose", "-p", "gravitino-playground", "ps", "-a"],
            ["docker", "compose", "-p", "gravitino-playground", "down"],
        ]
        assert "Playground stopped!" in quiet_console.file.getvalue()


class TestKubernetes:

    def test_apply_installs_release(self, config, fake_host, quiet_console):
        KubernetesAdapter(fake_host, config, quiet_console).apply()

        assert fake_host.calls == [[
            "helm", "upgrade", "--install", "gravitino-playground",
            str(config.playground_dir / "helm-chart"),
            "--create-namespace", "--namespace", "gravitino-playground",
            "--set", f"projectRoot={config.playground_dir}",
        ]]

    def test_project_root_is_absolute(self, config, fake_host, quiet_console):
        KubernetesAdapter(fake_host, config, quiet_console).apply()

        project_root = fake_host.calls[0][-1].split("=", 1)[1]
        assert project_root.startswith("/")

    def test_query(self, config, fake_host, quiet_console):
        KubernetesAdapter(fake_host, config, quiet_console).query()

        assert fake_host.calls == [["kubectl", "-n", "gravitino-playground", "get", "pods", "-o", "wide"]]

    def test_teardown_missing_release_is_not_an_error(self, config, fake_host, quiet_console):
        args = ["helm", "uninstall", "--namespace", "gravitino-playground", "gravitino-playground"]
        fake_host.respond(args, returncode=1, stderr="Error: uninstall: Release not loaded: gravitino-playground: release: not found")

        KubernetesAdapter(fake_host, config, quiet_console).teardown()

        assert fake_host.calls == [args]

    def test_teardown_other_errors_raise(self, config, fake_host, quiet_console):
        args = ["helm", "uninstall", "--namespace", "gravitino-playground", "gravitino-playground"]
        fake_host.respond(args, returncode=1, stderr="Error: Kubernetes cluster unreachable")

        with pytest.raises(CommandFailed):
            KubernetesAdapter(fake_host, config, quiet_console).teardown()
