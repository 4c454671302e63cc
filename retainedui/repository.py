"""Shared stores of loaded fonts and textures, keyed by handle."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Optional, Union

import pygame

PathLike = Union[str, os.PathLike]

_FONT_LOAD_SIZE = 32


class Repository(ABC):
    """A store of loaded resources."""

    @abstractmethod
    def load(self, handle: str, resource: PathLike) -> bool:
        """Load a resource file under a handle; False if it cannot be loaded."""

    @abstractmethod
    def clear(self) -> None:
        """Release every resource and the shared instance."""


class FontRepository(Repository):
    _instance: ClassVar[Optional[FontRepository]] = None

    def __init__(self) -> None:
        self._fonts: dict[str, pygame.font.Font] = {}
        self._paths: dict[str, Path] = {}

    @classmethod
    def shared(cls) -> FontRepository:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, handle: str) -> Optional[pygame.font.Font]:
        return self._fonts.get(handle)

    def path_of(self, handle: str) -> Optional[Path]:
        return self._paths.get(handle)

    def load(self, handle: str, resource: PathLike) -> bool:
        path = Path(resource)
        if not path.is_file():
            return False
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(str(path), _FONT_LOAD_SIZE)
        except (pygame.error, OSError):
            return False
        self._fonts[handle] = font
        self._paths[handle] = path
        return True

    def clear(self) -> None:
        self._fonts.clear()
        self._paths.clear()
        if type(self)._instance is self:
            type(self)._instance = None


class TextureRepository(Repository):
    _instance: ClassVar[Optional[TextureRepository]] = None

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    @classmethod
    def shared(cls) -> TextureRepository:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, handle: str) -> Optional[pygame.Surface]:
        return self._textures.get(handle)

    def load(self, handle: str, resource: PathLike) -> bool:
        path = Path(resource)
        if not path.is_file():
            return False
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, OSError):
            return False
        self._textures[handle] = texture
        return True

    def clear(self) -> None:
        self._textures.clear()
        if type(self)._instance is self:
            type(self)._instance = None


def init_repositories() -> list[Repository]:
    return [FontRepository.shared(), TextureRepository.shared()]


def clear_repositories(repositories: list[Repository]) -> None:
    for repository in repositories:
        repository.clear()