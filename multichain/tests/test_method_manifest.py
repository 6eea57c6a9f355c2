from __future__ import annotations

from build_method_manifest import DISABLED_METHODS, build_manifest, facade_entries
from client_factory import CLIENT_CLASSES
from coverage_check import compare
from method_registry import load_json, methods_by_category, supported_methods_from_manifest
from rpc_dispatch import facade_methods

from ._multichain_helpers import MANIFEST


def test_manifest_matches_facade_registries():
    payload = compare(load_json(MANIFEST))
    assert payload["ok"], payload
    assert payload["facade_count"] == payload["manifest_count"]


def test_checked_in_manifest_is_up_to_date():
    assert load_json(MANIFEST) == build_manifest(facade_entries())


def test_remote_methods_are_unique_across_clients():
    seen: dict[str, str] = {}
    for cls in CLIENT_CLASSES:
        for method in facade_methods(cls):
            assert method not in seen, f"{method} in both {seen.get(method)} and {cls.category}"
            seen[method] = cls.category


def test_supported_methods_exclude_disabled():
    supported = supported_methods_from_manifest(MANIFEST)
    assert not DISABLED_METHODS & set(supported)
    assert "getassetinfo" in supported


def test_methods_by_category():
    by_category = methods_by_category(MANIFEST)
    assert by_category["generate"] == ["getgenerate", "gethashespersec", "setgenerate"]
    assert "issue" in by_category["wallet"]
