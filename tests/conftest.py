import pygame
import pytest


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def screen(headless):
    from gridsnake import config

    pygame.init()
    return pygame.display.set_mode((config.WIDTH, config.HEIGHT), 0, 32)
