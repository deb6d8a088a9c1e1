import json
import subprocess

import pytest

from gitscan.core import Options, Scanner


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    for rel in ["dir1", "dir1/subdir1", "dir2", "dir2/subdir2"]:
        (root / rel).mkdir(parents=True, exist_ok=True)
    for rel in ["dir1", "dir2/subdir2"]:
        subprocess.run(["git", "init", "-q"], cwd=root / rel, check=True, capture_output=True)
    (root / "dir1" / "test.txt").write_text("test")
    return root


def test_run_default_options(tree, capsys):
    Scanner(Options(path=str(tree))).run()
    output = capsys.readouterr().out
    assert output.startswith("Found 1 Git repositories with uncommitted changes:\n")
    assert f"1. {tree / 'dir1'}\n" in output
    assert "   - untracked: test.txt\n" in output
    assert "subdir2" not in output


def test_run_json_output(tree, capsys):
    Scanner(Options(path=str(tree), json=True)).run()
    result = json.loads(capsys.readouterr().out)
    assert result["metadata"]["total_repositories"] == 1
    assert result["repositories"][0]["path"] == str(tree / "dir1")
    assert result["repositories"][0]["changes"] == ["untracked: test.txt"]


def test_run_verbose_output(tree, capsys):
    Scanner(Options(path=str(tree), verbose=True)).run()
    output = capsys.readouterr().out
    assert output.startswith("Found 2 Git repositories\n")
    assert "Found 1 Git repositories with uncommitted changes:" in output


def test_run_clean_tree(tmp_path, capsys):
    Scanner(Options(path=str(tmp_path))).run()
    assert capsys.readouterr().out == "No Git repositories with uncommitted changes found.\n"


def test_run_relative_path(tree, capsys, monkeypatch):
    monkeypatch.chdir(tree)
    Scanner(Options(path="dir1")).run()
    assert f"1. {tree / 'dir1'}\n" in capsys.readouterr().out


def test_run_invalid_path():
    with pytest.raises(FileNotFoundError, match="path does not exist"):
        Scanner(Options(path="/invalid/path")).run()