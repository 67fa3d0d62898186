"""Tests for BaseService."""

from shieldctl.domain.validation import DEFAULT_POLICY, STRICT_POLICY
from shieldctl.plugins.hookspecs import hookimpl
from shieldctl.plugins.manager import PluginManager
from shieldctl.services.base import BaseService


class _Recorder:
    def __init__(self) -> None:
        self.seen: list[str] = []

    @hookimpl
    def post_check(self, msg_type: str) -> None:
        self.seen.append(msg_type)


class TestBaseService:
    def test_default_policy(self) -> None:
        assert BaseService().policy == DEFAULT_POLICY

    def test_explicit_policy(self) -> None:
        assert BaseService(policy=STRICT_POLICY).policy == STRICT_POLICY

    def test_dispatch_without_plugins_is_noop(self) -> None:
        warnings: list[str] = []
        BaseService()._dispatch_hook("post_check", {"msg_type": "x"}, warnings)
        assert warnings == []

    def test_dispatch_calls_hook(self) -> None:
        recorder = _Recorder()
        pm = PluginManager()
        pm.register_plugin(recorder)
        warnings: list[str] = []
        BaseService(plugins=pm)._dispatch_hook("post_check", {"msg_type": "pause_pool"}, warnings)
        assert recorder.seen == ["pause_pool"]
        assert warnings == []

    def test_unknown_hook_is_warning(self) -> None:
        warnings: list[str] = []
        BaseService(plugins=PluginManager())._dispatch_hook("no_such_hook", {}, warnings)
        assert warnings == ["Hook dispatch failed for no_such_hook"]
