"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from tmexclude.exclusion.backend import ExclusionBackend, ExclusionError
from tmexclude.rules.models import ClassificationRule, RuleSet


class FakeBackend(ExclusionBackend):
    """In-memory exclusion backend recording every call."""

    def __init__(self) -> None:
        self.excluded: set[str] = set()
        self.add_calls: list[str] = []
        self.query_calls: list[str] = []
        self.fail_add: dict[str, str] = {}
        self.fail_query: dict[str, str] = {}
        self.available = True

    @property
    def name(self) -> str:
        return "Fake"

    def is_available(self) -> bool:
        return self.available

    def is_excluded(self, path: str) -> bool:
        self.query_calls.append(path)
        if path in self.fail_query:
            raise ExclusionError(path, self.fail_query[path])
        return path in self.excluded

    def add_exclusion(self, path: str) -> None:
        self.add_calls.append(path)
        if path in self.fail_add:
            raise ExclusionError(path, self.fail_add[path])
        self.excluded.add(path)


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Fresh in-memory backend with nothing excluded."""
    return FakeBackend()


@pytest.fixture
def make_rule_set() -> Callable[..., RuleSet]:
    """Factory building a RuleSet from ``"name sentinel"`` strings."""

    def _make(*pairs: str, skip: tuple[str | Path, ...] = ()) -> RuleSet:
        rules = [ClassificationRule(*pair.split()) for pair in pairs]
        return RuleSet.build(rules, skip)

    return _make


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """A small home-like tree with one Python project.

    Layout::

        home/proj/requirements.txt
        home/proj/.venv/lib/site-packages/pkg/__init__.py
        home/proj/src/app.py
    """
    home = tmp_path / "home"
    proj = home / "proj"
    site_packages = proj / ".venv" / "lib" / "site-packages"
    (site_packages / "pkg").mkdir(parents=True)
    (site_packages / "pkg" / "__init__.py").write_text("")
    (proj / "requirements.txt").write_text("requests\n")
    (proj / "src").mkdir()
    (proj / "src" / "app.py").write_text("print('hi')\n")
    return home


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging."""
    package_logger = logging.getLogger("tmexclude")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
