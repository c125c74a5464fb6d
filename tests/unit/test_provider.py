from pathlib import Path

import pytest

from tilt_maze.levels.parser import parse
from tilt_maze.levels.provider import (
    DirectoryLevelProvider,
    LevelResourceError,
    MappingLevelProvider,
    PackageLevelProvider,
)
from tilt_maze.types import EntityKind


def test_mapping_provider() -> None:
    provider = MappingLevelProvider({1: "p", 2: "pf"})
    assert provider.get_level(1) == "p"
    assert provider.get_level(2) == "pf"
    assert provider.get_level(3) is None


def test_directory_provider_reads_numbered_files(tmp_path: Path) -> None:
    (tmp_path / "level1.txt").write_text("xxx\nxpx\nxxx\n", encoding="utf-8")
    provider = DirectoryLevelProvider(tmp_path)
    assert provider.get_level(1) == "xxx\nxpx\nxxx\n"
    assert provider.get_level(2) is None


def test_directory_provider_custom_pattern(tmp_path: Path) -> None:
    (tmp_path / "maze-07.lvl").write_text("p", encoding="utf-8")
    provider = DirectoryLevelProvider(tmp_path, pattern="maze-{number:02d}.lvl")
    assert provider.path_for(7) == tmp_path / "maze-07.lvl"
    assert provider.get_level(7) == "p"


def test_directory_provider_unreadable_file(tmp_path: Path) -> None:
    (tmp_path / "level1.txt").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(LevelResourceError):
        DirectoryLevelProvider(tmp_path).get_level(1)


def test_directory_provider_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "level1.txt").mkdir()
    assert DirectoryLevelProvider(tmp_path).get_level(1) is None


def test_bundled_levels_parse() -> None:
    provider = PackageLevelProvider()
    number = 1
    while (text := provider.get_level(number)) is not None:
        directives = parse(text, number)
        kinds = {d.kind for d in directives}
        assert EntityKind.PLAYER in kinds
        assert EntityKind.FINISH in kinds
        number += 1
    assert number > 2


def test_bundled_levels_end() -> None:
    assert PackageLevelProvider().get_level(999) is None
