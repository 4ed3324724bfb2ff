"""Shared fixtures."""

import pytest


@pytest.fixture
def images(tmp_path):
    """Create four small source images and return (sources, out_dir)."""
    src_dir = tmp_path / "src"
    out_dir = tmp_path / "out"
    src_dir.mkdir()
    out_dir.mkdir()

    sources = []
    for i in range(4):
        path = src_dir / f"page{i}.jpg"
        path.write_bytes(f"image-{i}".encode())
        sources.append(path)

    return sources, out_dir
