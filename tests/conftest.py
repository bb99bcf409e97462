import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from obsolescence_report.analysis import ITComponent, Lifecycle, LifecyclePhase
from obsolescence_report.catalog import CategoryMetadata, SnapshotCatalogFetcher
from obsolescence_report.config import load_config, resolve_path


def make_component(id, eol=None, category="A", name=None, phases=None, **extra):
    """IT component with an endOfLife phase at ``eol`` (no lifecycle when phases is False)."""
    if phases is False:
        lifecycle = None
    else:
        records = list(phases or [])
        if eol is not None:
            records.append(LifecyclePhase("endOfLife", eol))
        lifecycle = Lifecycle(lifecycle_phase="active", phases=tuple(records))
    return ITComponent(
        id=str(id), name=name or f"Component {id}", category=category, lifecycle=lifecycle, extra=extra
    )


@pytest.fixture(scope="session")
def config_path() -> Path:
    return ROOT / "config.yaml"


@pytest.fixture(scope="session")
def cfg(config_path):
    return load_config(config_path)


@pytest.fixture(scope="session")
def snapshot_path(cfg) -> Path:
    return resolve_path(cfg, cfg["catalog"]["snapshot"])


@pytest.fixture()
def snapshot_fetcher(snapshot_path):
    return SnapshotCatalogFetcher(snapshot_path)


@pytest.fixture(scope="session")
def sample_components(snapshot_path):
    return asyncio.run(SnapshotCatalogFetcher(snapshot_path).fetch())


@pytest.fixture(scope="session")
def sample_metadata(snapshot_path):
    return asyncio.run(SnapshotCatalogFetcher(snapshot_path).fetch_metadata())


@pytest.fixture()
def metadata():
    return CategoryMetadata(
        labels={"A": "Category A", "B": "Category B"},
        colors={
            "A": {"bgColor": "#112233", "color": "#ffffff"},
            "B": {"bgColor": "#445566", "color": "#000000"},
        },
    )
