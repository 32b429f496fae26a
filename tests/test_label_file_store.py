from __future__ import annotations

from pathlib import Path

from image_train_launcher.adapters.right.label_files_filesystem import FilesystemLabelFileStore


def _write_labels(path: Path, newline: bytes) -> None:
    rows = [b"img_001.jpg,0", b"img_002.jpg,1", b"img_003.jpg,2"]
    path.write_bytes(newline.join(rows) + newline)


def test_plain_copy_preserves_bytes(tmp_path: Path) -> None:
    src = tmp_path / "labels.csv"
    _write_labels(src, b"\r\n")
    dest_dir = tmp_path / "L1"
    dest_dir.mkdir()

    out = FilesystemLabelFileStore().copy(
        source=src, dest_dir=dest_dir, dest_name="data_info_train.csv", normalize_line_endings=False
    )

    assert out == dest_dir / "data_info_train.csv"
    assert out.read_bytes() == src.read_bytes()


def test_rewrite_strips_windows_line_endings(tmp_path: Path) -> None:
    src = tmp_path / "labels.csv"
    _write_labels(src, b"\r\n")
    dest_dir = tmp_path / "L1"
    dest_dir.mkdir()

    out = FilesystemLabelFileStore().copy(
        source=src, dest_dir=dest_dir, dest_name="data_info_train.csv", normalize_line_endings=True
    )

    data = out.read_bytes()
    assert b"\r" not in data
    assert data.splitlines() == [b"img_001.jpg,0", b"img_002.jpg,1", b"img_003.jpg,2"]
    assert data.count(b"\n") == 3


def test_rewrite_keeps_unix_file_unchanged(tmp_path: Path) -> None:
    src = tmp_path / "labels.csv"
    _write_labels(src, b"\n")
    dest_dir = tmp_path / "L1"
    dest_dir.mkdir()

    out = FilesystemLabelFileStore().copy(
        source=src, dest_dir=dest_dir, dest_name="data_info_train.csv", normalize_line_endings=True
    )

    assert out.read_bytes() == src.read_bytes()
