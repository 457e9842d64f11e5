"""
Global test configuration.
"""

import os

import pytest

from work_registry import registry as registry_module
from work_registry.discovery import StaticDiscovery
from work_registry.providers.hello import HelloWorkProvider
from work_registry.registry import ProviderRegistry


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_registry_env(request, monkeypatch):
    """Ensure a clean WORK_REGISTRY_* environment for each test.

    Escape hatch: @pytest.mark.allow_env_pollution keeps the environment.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("WORK_REGISTRY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_registry(monkeypatch):
    """Start every test without a process-wide registry."""
    monkeypatch.setattr(registry_module, "_default_registry", None)


@pytest.fixture(autouse=True)
def neutral_project_dir(monkeypatch, tmp_path):
    """Run from an empty directory so no real pyproject.toml is picked up."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Invariants of the registry and its contracts",
        "allow_env_pollution: Keep WORK_REGISTRY_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


# --- Core Fixtures ---


@pytest.fixture
def hello_registry() -> ProviderRegistry:
    """A registry whose only installed provider is the hello provider."""
    return ProviderRegistry(StaticDiscovery(HelloWorkProvider))


@pytest.fixture
def use_default_registry(monkeypatch):
    """Install the given registry as the process-wide default."""

    def _install(registry: ProviderRegistry) -> ProviderRegistry:
        monkeypatch.setattr(registry_module, "_default_registry", registry)
        return registry

    return _install
