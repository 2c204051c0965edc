import os
from pathlib import Path

import pytest

from plataformas.resources import search_and_set_resource_dir


def _cwd():
    return Path(os.getcwd()).resolve()


def test_found_in_working_dir(tmp_path, monkeypatch):
    (tmp_path / "resources").mkdir()
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("resources", tmp_path / "nowhere") is True
    assert _cwd() == (tmp_path / "resources").resolve()


def test_found_in_app_dir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (app / "resources").resolve()


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_found_above_app_dir(tmp_path, monkeypatch, depth):
    work = tmp_path / "work"
    work.mkdir()
    app = tmp_path.joinpath(*[f"d{i}" for i in range(depth)])
    app.mkdir(parents=True)
    (tmp_path / "resources").mkdir()
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (tmp_path / "resources").resolve()


def test_not_found_four_levels_up(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    app = tmp_path / "a" / "b" / "c" / "d"
    app.mkdir(parents=True)
    (tmp_path / "resources").mkdir()
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is False
    assert _cwd() == work.resolve()


def test_file_with_same_name_is_ignored(tmp_path, monkeypatch):
    (tmp_path / "resources").write_text("not a directory")
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("resources", tmp_path / "missing") is False
    assert _cwd() == tmp_path.resolve()


def test_working_dir_takes_precedence(tmp_path, monkeypatch):
    work = tmp_path / "work"
    (work / "resources").mkdir(parents=True)
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (work / "resources").resolve()