"""Tests for text_trees.fs — directory walking and entry markers."""

import logging
import os
import sys
from pathlib import Path

import pytest

from text_trees import FSEntry, box_chars, dir_tree, make_dir_tree, render
from text_trees.fs import P_FILE, P_FOLDER, P_GONE, P_HOME, P_LINK

needs_symlinks = pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")


def _make_file(p: Path, content: str = "x") -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    _make_file(root / "src" / "b.py")
    _make_file(root / "src" / "A.py")
    _make_file(root / "README.md")
    (root / "docs").mkdir()
    return root


class TestMakeDirTree:
    def test_directories_first_then_case_insensitive(self, project: Path):
        expected = (
            f"{P_FOLDER} project\n"
            f"├── {P_FOLDER} docs\n"
            f"├── {P_FOLDER} src\n"
            f"│  ├── {P_FILE} A.py\n"
            f"│  └── {P_FILE} b.py\n"
            f"└── {P_FILE} README.md\n"
        )
        assert render(make_dir_tree(project), dir_tree(box_chars())) == expected

    def test_accepts_str_path(self, project: Path):
        assert make_dir_tree(str(project)) == make_dir_tree(project)

    def test_file_root(self, project: Path):
        tree = make_dir_tree(project / "README.md")
        assert not tree.has_children()
        assert tree.label() == f"{P_FILE} README.md"

    def test_data_is_fs_entry(self, project: Path):
        tree = make_dir_tree(project)
        assert isinstance(tree.data, FSEntry)
        assert tree.data.path == project

    def test_home_marker(self, project: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(project))
        monkeypatch.setenv("USERPROFILE", str(project))
        assert make_dir_tree(project).label() == f"{P_HOME} project"

    def test_unreadable_directory_logged(self, project: Path, monkeypatch, caplog):
        real_iterdir = Path.iterdir

        def fake_iterdir(self):
            if self.name == "src":
                raise PermissionError("denied")
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", fake_iterdir)
        with caplog.at_level(logging.WARNING, logger="text_trees.fs"):
            tree = make_dir_tree(project)
        src = [n for _, n in tree.walk() if n.data.path.name == "src"][0]
        assert not src.has_children()
        assert "cannot read directory" in caplog.text

    def test_nesting_deeper_than_recursion_limit(self, tmp_path: Path):
        # Path.mkdir(parents=True) recurses, so build the chain one level at a time.
        depth = 1100
        p = tmp_path
        for _ in range(depth):
            p = p / "d"
            p.mkdir()
        tree = make_dir_tree(tmp_path)
        walked = list(tree.walk())
        assert len(walked) == depth + 1
        assert walked[-1][0] == depth
        assert walked[-1][1].label() == f"{P_FOLDER} d"

    @needs_symlinks
    def test_symlink_and_broken_link_markers(self, project: Path):
        os.symlink(project / "README.md", project / "link.md")
        os.symlink(project / "missing.txt", project / "dangling")
        labels = [n.label() for _, n in make_dir_tree(project).walk()]
        assert f"{P_LINK} link.md" in labels
        assert f"{P_GONE} dangling" in labels

    @needs_symlinks
    def test_symlinked_directory_not_followed_by_default(self, project: Path):
        os.symlink(project / "src", project / "alias", target_is_directory=True)
        tree = make_dir_tree(project)
        alias = [n for _, n in tree.walk() if n.data.path.name == "alias"][0]
        assert alias.label() == f"{P_FOLDER} alias"
        assert not alias.has_children()

        followed = make_dir_tree(project, follow_symlinks=True)
        alias = [n for _, n in followed.walk() if n.data.path.name == "alias"][0]
        assert [c.data.path.name for c in alias.children()] == ["A.py", "b.py"]

    @needs_symlinks
    def test_symlink_loop_not_followed(self, project: Path, caplog):
        os.symlink(project, project / "src" / "up", target_is_directory=True)
        with caplog.at_level(logging.WARNING, logger="text_trees.fs"):
            tree = make_dir_tree(project, follow_symlinks=True)
        up = [n for _, n in tree.walk() if n.data.path.name == "up"][0]
        assert not up.has_children()
        assert "loops back" in caplog.text


class TestFSEntry:
    def test_label_tracks_filesystem(self, tmp_path: Path):
        p = tmp_path / "later.txt"
        entry = FSEntry(p)
        assert str(entry) == f"{P_GONE} later.txt"
        _make_file(p)
        assert str(entry) == f"{P_FILE} later.txt"

    def test_name_falls_back_to_path(self):
        assert FSEntry(Path(".")).name == "."
