"""Level resource providers.

A provider answers one question: *what is the text of level N?* ``None``
means there is no such level, which the world treats as the end of the level
sequence rather than an error. A resource that exists but cannot be read is
a packaging problem and raises :class:`LevelResourceError`.

Three implementations cover the usual hosts:

* :class:`MappingLevelProvider` for levels held in memory (tests, generated
  content);
* :class:`DirectoryLevelProvider` for ``level{number}.txt`` files on disk;
* :class:`PackageLevelProvider` for the levels shipped inside this package.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "level{number}.txt"


class LevelResourceError(RuntimeError):
    """An existing level resource could not be read."""


class LevelProvider(Protocol):
    def get_level(self, number: int) -> Optional[str]:
        """Return the text of level ``number`` or ``None`` if it does not exist."""
        ...


class MappingLevelProvider:
    """Serve level texts from a ``{number: text}`` mapping."""

    def __init__(self, levels: Mapping[int, str]) -> None:
        self._levels = dict(levels)

    def get_level(self, number: int) -> Optional[str]:
        return self._levels.get(number)


class DirectoryLevelProvider:
    """Serve ``level{number}.txt`` files from a directory."""

    def __init__(
        self, directory: Union[str, Path], pattern: str = DEFAULT_PATTERN
    ) -> None:
        self.directory = Path(directory)
        self.pattern = pattern

    def path_for(self, number: int) -> Path:
        return self.directory / self.pattern.format(number=number)

    def get_level(self, number: int) -> Optional[str]:
        path = self.path_for(number)
        if not path.is_file():
            logger.debug("No level resource at %s", path)
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LevelResourceError(f"Could not load {path}") from e


class PackageLevelProvider:
    """Serve the levels bundled in ``tilt_maze.levels.data``."""

    def __init__(
        self, package: str = "tilt_maze.levels.data", pattern: str = DEFAULT_PATTERN
    ) -> None:
        self.package = package
        self.pattern = pattern

    def get_level(self, number: int) -> Optional[str]:
        resource = resources.files(self.package).joinpath(
            self.pattern.format(number=number)
        )
        if not resource.is_file():
            logger.debug("No bundled level %d in %s", number, self.package)
            return None
        try:
            return resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LevelResourceError(
                f"Could not load level {number} from {self.package}"
            ) from e
