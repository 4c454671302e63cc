import pygame
import pytest

from retainedui.repository import (
    FontRepository,
    TextureRepository,
    clear_repositories,
    init_repositories,
)


@pytest.fixture
def repos():
    found = init_repositories()
    yield found
    clear_repositories(found)


@pytest.fixture
def png(tmp_path):
    surface = pygame.Surface((7, 5))
    path = tmp_path / "pic.png"
    pygame.image.save(surface, str(path))
    return path


def test_shared_instances(repos):
    assert repos[0] is FontRepository.shared()
    assert repos[1] is TextureRepository.shared()


def test_clear_resets_shared(repos):
    first = TextureRepository.shared()
    clear_repositories(repos)
    assert TextureRepository.shared() is not first


def test_texture_load_and_get(repos, png):
    textures = TextureRepository.shared()
    assert textures.load("cat", png) is True
    assert textures.get("cat").get_size() == (7, 5)


def test_texture_missing_file(repos, tmp_path):
    textures = TextureRepository.shared()
    assert textures.load("x", tmp_path / "nope.png") is False
    assert textures.get("x") is None


def test_texture_directory_rejected(repos, tmp_path):
    assert TextureRepository.shared().load("dir", tmp_path) is False


def test_font_missing_and_invalid(repos, tmp_path):
    fonts = FontRepository.shared()
    bad = tmp_path / "bad.ttf"
    bad.write_bytes(b"not a font")
    assert fonts.load("roboto", tmp_path / "missing.ttf") is False
    assert fonts.load("roboto", bad) is False
    assert fonts.get("roboto") is None


def test_texture_clear_drops_entries(repos, png):
    textures = TextureRepository.shared()
    textures.load("cat", png)
    textures.clear()
    assert textures.get("cat") is None