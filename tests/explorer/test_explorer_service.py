"""Tests for RemoteExplorerService."""

from unittest.mock import Mock

import pytest

from remote_tunnels.explorer import (
    REMOTE_EXPLORER_TYPE_KEY,
    HelpContribution,
    InMemoryPreferenceStore,
    PreferenceStore,
    RemoteExplorerService,
    StorageScope,
)
from remote_tunnels.tunnels import TunnelModel, TunnelModelConfig


@pytest.fixture
def store():
    return InMemoryPreferenceStore()


@pytest.fixture
def service(store, mock_transport):
    return RemoteExplorerService(store, transport=mock_transport)


class TestTargetType:
    def test_initially_empty(self, service):
        assert service.target_type == ""

    def test_restored_from_workspace_scope_first(self, store):
        store.store(REMOTE_EXPLORER_TYPE_KEY, "global-type", StorageScope.GLOBAL)
        store.store(REMOTE_EXPLORER_TYPE_KEY, "workspace-type", StorageScope.WORKSPACE)

        assert RemoteExplorerService(store).target_type == "workspace-type"

    def test_restored_from_global_scope(self, store):
        store.store(REMOTE_EXPLORER_TYPE_KEY, "ssh", StorageScope.GLOBAL)

        assert RemoteExplorerService(store).target_type == "ssh"

    def test_change_persists_in_both_scopes_and_fires(self, service, store):
        changes = []
        service.on_did_change_target_type.subscribe(changes.append)

        service.target_type = "wsl"

        assert service.target_type == "wsl"
        assert store.get(REMOTE_EXPLORER_TYPE_KEY, StorageScope.WORKSPACE) == "wsl"
        assert store.get(REMOTE_EXPLORER_TYPE_KEY, StorageScope.GLOBAL) == "wsl"
        assert changes == ["wsl"]

    def test_same_value_is_noop(self):
        store = Mock()
        store.get.return_value = "ssh"
        service = RemoteExplorerService(store)
        changes = []
        service.on_did_change_target_type.subscribe(changes.append)

        service.target_type = "ssh"

        store.store.assert_not_called()
        assert changes == []


class TestHelpInformation:
    def test_initially_empty(self, service):
        assert service.help_information == ()

    def test_accepts_proposed_api_contributions_with_links(self, service):
        service.set_help_contributions(
            [
                HelpContribution(
                    extension_id="acme.remote-ssh",
                    enable_proposed_api=True,
                    documentation="https://example.com/docs",
                    issues="https://example.com/issues",
                ),
            ]
        )

        (info,) = service.help_information
        assert info.extension_id == "acme.remote-ssh"
        assert info.documentation == "https://example.com/docs"
        assert info.issues == "https://example.com/issues"
        assert info.get_started is None
        assert info.feedback is None

    def test_skips_without_proposed_api(self, service):
        service.set_help_contributions(
            [HelpContribution(extension_id="acme.a", feedback="https://example.com/f")]
        )

        assert service.help_information == ()

    def test_skips_without_links(self, service):
        service.set_help_contributions(
            [HelpContribution(extension_id="acme.a", enable_proposed_api=True)]
        )

        assert service.help_information == ()

    def test_rebuild_replaces_previous(self, service):
        first = HelpContribution(
            extension_id="acme.a", enable_proposed_api=True, get_started="https://a"
        )
        second = HelpContribution(
            extension_id="acme.b", enable_proposed_api=True, get_started="https://b"
        )
        service.set_help_contributions([first])

        service.set_help_contributions([second])

        assert [info.extension_id for info in service.help_information] == ["acme.b"]


class TestTunnelModelOwnership:
    def test_owns_tunnel_model(self, service, mock_transport):
        assert isinstance(service.tunnel_model, TunnelModel)

        service.tunnel_model.forward("3000")

        mock_transport.establish.assert_called_once()
        assert str(service.tunnel_model.address("3000")) == "http://localhost:3000"

    def test_passes_config(self, store):
        service = RemoteExplorerService(store, config=TunnelModelConfig(seed_sample_data=True))

        assert "3500" in service.tunnel_model.published

    def test_dispose_clears_listeners(self, service):
        changes = []
        closed = []
        service.on_did_change_target_type.subscribe(changes.append)
        service.tunnel_model.on_close_port.subscribe(closed.append)
        service.tunnel_model.forward("3000")

        service.dispose()
        service.target_type = "ssh"
        service.tunnel_model.close("3000")

        assert changes == []
        assert closed == []


class TestInMemoryPreferenceStore:
    def test_satisfies_protocol(self, store):
        assert isinstance(store, PreferenceStore)

    def test_scopes_are_separate(self, store):
        store.store("k", "v", StorageScope.GLOBAL)

        assert store.get("k", StorageScope.GLOBAL) == "v"
        assert store.get("k", StorageScope.WORKSPACE) is None
        assert store.get("k", StorageScope.WORKSPACE, default="d") == "d"
