"""Shared test fixtures."""

import os
import pickle
import zlib

import pytest

from rgss_serializer.domain.models import ScriptEntry


# ── Sample Data ──────────────────────────────────────────────────────────

BASE_TIME = 1_600_000_000

SCENARIO_ENTRIES = [
    ScriptEntry(id=1, name='Main', code=b'puts 1'),
    ScriptEntry(id=2, name='', code=b''),
    ScriptEntry(id=3, name='Main', code=b'puts 3'),
]

SAMPLE_ACTORS = [
    None,
    {'id': 1, 'name': 'Eric', 'class_id': 1, 'equips': [1, 0, 2, 3, 0]},
    {'id': 2, 'name': 'Natalie', 'class_id': 2, 'equips': [4, 0, 5, 6, 0]},
]


def compress(code: bytes) -> bytes:
    return zlib.compress(code, 9)


def write_bundle(path, entries) -> None:
    """Write a script bundle the way the game editor stores it."""
    rows = [[e.id, e.name, compress(e.code)] for e in entries]
    with open(path, 'wb') as f:
        pickle.dump(rows, f)


def read_bundle(path) -> list:
    with open(path, 'rb') as f:
        return pickle.load(f)


def write_pickle(path, data) -> None:
    with open(path, 'wb') as f:
        pickle.dump(data, f)


def read_pickle(path):
    with open(path, 'rb') as f:
        return pickle.load(f)


def set_mtime(path, mtime: float) -> None:
    os.utime(path, (mtime, mtime))


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def project_dir(tmp_path):
    """A VX Ace project with a data file and a three-entry script bundle."""
    base = tmp_path / 'project'
    data = base / 'Data'
    data.mkdir(parents=True)
    write_pickle(data / 'Actors.rvdata2', SAMPLE_ACTORS)
    write_bundle(data / 'Scripts.rvdata2', SCENARIO_ENTRIES)
    set_mtime(data / 'Actors.rvdata2', BASE_TIME)
    set_mtime(data / 'Scripts.rvdata2', BASE_TIME)
    return base


@pytest.fixture
def bundle_paths(tmp_path):
    """Bundle, index and script directory paths for split/join tests."""
    data = tmp_path / 'Data'
    yaml_dir = tmp_path / 'YAML'
    scripts = tmp_path / 'Scripts'
    for d in (data, yaml_dir, scripts):
        d.mkdir()
    bundle = data / 'Scripts.rvdata2'
    write_bundle(bundle, SCENARIO_ENTRIES)
    set_mtime(bundle, BASE_TIME)
    return {
        'bundle': str(bundle),
        'index': str(yaml_dir / 'Scripts.yaml'),
        'scripts': str(scripts),
    }
