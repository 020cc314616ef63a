"""Tests for project directory assembly."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from kicad2zen.exceptions import DuplicateFileError, FormatError, IoError
from kicad2zen.project import Project, convert_project, load_project

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures" / "blinky"

MINIMAL_SCH = "(kicad_sch (version 20231120))"
MINIMAL_PCB = '(kicad_pcb (version 20240108) (net 0 "") (net 1 "GND"))'


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "board"
    directory.mkdir()
    return directory


class TestLoadProject:
    def test_fixture_project(self) -> None:
        project = load_project(FIXTURE_DIR)
        assert project.name == "blinky"
        assert project.found == {"schematic": True, "pcb": True, "settings": True}
        assert project.schematic is not None
        assert len(project.schematic.symbols) == 4
        assert project.pcb is not None
        assert len(project.pcb.footprints) == 4
        assert project.settings is not None

    def test_accepts_str_path(self) -> None:
        assert load_project(str(FIXTURE_DIR)).name == "blinky"

    def test_empty_directory(self, project_dir: Path) -> None:
        project = load_project(project_dir)
        assert project == Project(name="board")

    def test_only_pcb(self, project_dir: Path) -> None:
        (project_dir / "board.kicad_pcb").write_text(MINIMAL_PCB)
        project = load_project(project_dir)
        assert project.schematic is None
        assert project.pcb is not None
        assert project.pcb.nets[1] == "GND"

    def test_unrecognized_files_ignored(self, project_dir: Path) -> None:
        (project_dir / "notes.txt").write_text("hello")
        (project_dir / "board.kicad_prl").write_text("{}")
        (project_dir / "fp-lib-table").write_text("(fp_lib_table)")
        assert load_project(project_dir).found == {
            "schematic": False,
            "pcb": False,
            "settings": False,
        }

    def test_subdirectories_not_searched(self, project_dir: Path) -> None:
        sub = project_dir / "sub"
        sub.mkdir()
        (sub / "nested.kicad_sch").write_text(MINIMAL_SCH)
        assert load_project(project_dir).schematic is None

    def test_directory_named_like_kicad_file_ignored(self, project_dir: Path) -> None:
        (project_dir / "odd.kicad_sch").mkdir()
        assert load_project(project_dir).schematic is None


class TestDuplicates:
    def test_last_by_name_wins(self, project_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        (project_dir / "a.kicad_pcb").write_text('(kicad_pcb (net 1 "FROM_A"))')
        (project_dir / "b.kicad_pcb").write_text('(kicad_pcb (net 1 "FROM_B"))')
        with caplog.at_level(logging.WARNING, logger="kicad2zen.project"):
            project = load_project(project_dir)
        assert project.pcb is not None
        assert project.pcb.nets == {1: "FROM_B"}
        assert "Multiple .kicad_pcb files" in caplog.text

    def test_strict_raises(self, project_dir: Path) -> None:
        (project_dir / "a.kicad_sch").write_text(MINIMAL_SCH)
        (project_dir / "b.kicad_sch").write_text(MINIMAL_SCH)
        with pytest.raises(DuplicateFileError) as exc_info:
            load_project(project_dir, strict=True)
        assert len(exc_info.value.paths) == 2
        assert exc_info.value.to_dict()["error_code"] == "DUPLICATE_FILE"


class TestErrors:
    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(IoError):
            load_project(tmp_path / "nowhere")

    def test_path_is_a_file(self, tmp_path: Path) -> None:
        path = tmp_path / "file.kicad_sch"
        path.write_text(MINIMAL_SCH)
        with pytest.raises(IoError):
            load_project(path)

    def test_bad_file_format(self, project_dir: Path) -> None:
        (project_dir / "board.kicad_sch").write_text("(kicad_pcb)")
        with pytest.raises(FormatError):
            load_project(project_dir)

    def test_bad_settings_json(self, project_dir: Path) -> None:
        (project_dir / "board.kicad_pro").write_text("not json")
        with pytest.raises(FormatError):
            load_project(project_dir)


class TestConvertProject:
    def test_returns_project_and_source(self, tmp_path: Path) -> None:
        directory = tmp_path / "blinky"
        shutil.copytree(FIXTURE_DIR, directory)
        project, source = convert_project(directory)
        assert project.name == "blinky"
        assert source == project.to_zen()

    def test_to_dict(self) -> None:
        d = load_project(FIXTURE_DIR).to_dict()
        assert d["name"] == "blinky"
        assert d["found"]["pcb"] is True
        assert d["settings"]["net_classes"][1]["name"] == "Power"
