from pathlib import Path

from pixelplay.assets import copy_folder_contents


def _make_tree(root: Path) -> Path:
    src = root / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.glsl").write_text("alpha")
    (src / "sub" / "b.png").write_bytes(b"\x01\x02")
    (src / ".hidden").write_text("no")
    return src


def test_copies_top_level_files_and_creates_target(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    copied = copy_folder_contents(src, dst)
    assert (dst / "a.glsl").read_text() == "alpha"
    assert dst / "a.glsl" in copied


def test_hidden_files_are_skipped(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    copy_folder_contents(src, dst)
    assert not (dst / ".hidden").exists()


def test_subfolder_files_skipped_without_make_dirs(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    copied = copy_folder_contents(src, dst)
    assert not (dst / "sub").exists()
    assert len(copied) == 1


def test_make_dirs_copies_whole_tree(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    copied = copy_folder_contents(src, dst, make_dirs=True)
    assert (dst / "sub" / "b.png").read_bytes() == b"\x01\x02"
    assert sorted(p.name for p in copied) == ["a.glsl", "b.png"]


def test_existing_files_are_replaced(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "a.glsl").write_text("old")
    copy_folder_contents(src, dst)
    assert (dst / "a.glsl").read_text() == "alpha"


def test_remove_source(tmp_path):
    src = _make_tree(tmp_path)
    dst = tmp_path / "dst"
    copy_folder_contents(src, dst, remove_source=True, make_dirs=True)
    assert not src.exists()
    assert (dst / "sub" / "b.png").exists()


def test_source_kept_by_default(tmp_path):
    src = _make_tree(tmp_path)
    copy_folder_contents(src, tmp_path / "dst")
    assert (src / "a.glsl").read_text() == "alpha"