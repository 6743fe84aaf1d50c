"""Tests for project file writes."""

from __future__ import annotations

from pathlib import Path

from rsforge.infrastructure.filesystem import (
    GITIGNORE_CONTENT,
    create_module_dir,
    relative_to,
    write_entry_point,
    write_gitignore,
)


class TestWriteEntryPoint:
    def test_overwrites_existing_main(self, tmp_path: Path) -> None:
        main = tmp_path / "src" / "main.rs"
        main.parent.mkdir()
        main.write_text("old contents that are much longer than the new ones\n" * 10)

        path = write_entry_point(tmp_path, "fn main() {}\n")

        assert path == main
        assert main.read_text(encoding="utf-8") == "fn main() {}\n"

    def test_creates_src_when_missing(self, tmp_path: Path) -> None:
        write_entry_point(tmp_path, "x")
        assert (tmp_path / "src" / "main.rs").read_text(encoding="utf-8") == "x"


class TestCreateModuleDir:
    def test_creates_empty_mod_rs(self, tmp_path: Path) -> None:
        path = create_module_dir(tmp_path, "services")
        assert path == tmp_path / "src" / "services" / "mod.rs"
        assert path.is_file()
        assert path.read_bytes() == b""

    def test_idempotent(self, tmp_path: Path) -> None:
        create_module_dir(tmp_path, "routes")
        (tmp_path / "src" / "routes" / "mod.rs").write_text("pub mod x;")
        create_module_dir(tmp_path, "routes")
        assert (tmp_path / "src" / "routes" / "mod.rs").read_bytes() == b""
        assert [p.name for p in (tmp_path / "src" / "routes").iterdir()] == ["mod.rs"]


class TestWriteGitignore:
    def test_replaces_cargo_gitignore(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("/target\n")
        write_gitignore(tmp_path)
        content = (tmp_path / ".gitignore").read_text(encoding="utf-8")
        assert content == GITIGNORE_CONTENT
        assert "/target/" in content
        assert ".env.*.local" in content


def test_relative_to(tmp_path: Path) -> None:
    assert relative_to(tmp_path / "src" / "main.rs", tmp_path) == "src/main.rs"
    assert relative_to(Path("/elsewhere/x"), tmp_path) == "/elsewhere/x"
