import pygame
import pytest

from game.controller import Controller, movement_for_key


@pytest.mark.parametrize("key, expected", [
    (pygame.K_d, (1, 0)),
    (pygame.K_a, (-1, 0)),
    (pygame.K_w, (0, -1)),
    (pygame.K_s, (0, 1)),
])
def test_mapped_keys_move_one_cell(fake_maze, key, expected):
    controller = Controller(fake_maze)

    assert controller.key_pressed(key) == expected
    assert fake_maze.moves == [expected]


@pytest.mark.parametrize("key", [pygame.K_q, pygame.K_UP, pygame.K_SPACE, pygame.K_RETURN])
def test_unmapped_key_still_reaches_maze_as_zero_move(fake_maze, key):
    controller = Controller(fake_maze)

    assert controller.key_pressed(key) == (0, 0)
    assert fake_maze.moves == [(0, 0)]


def test_key_presses_are_logged(fake_maze, capsys):
    controller = Controller(fake_maze)
    controller.key_pressed(pygame.K_d)
    controller.key_pressed(pygame.K_a)
    controller.key_pressed(pygame.K_w)
    controller.key_pressed(pygame.K_s)
    controller.key_pressed(pygame.K_x)

    out = capsys.readouterr().out.splitlines()
    assert out == ["right", "left", "up", "down", "Key Pressed!!!"]


def test_repeated_presses_are_not_suppressed(fake_maze):
    controller = Controller(fake_maze)
    for _ in range(3):
        controller.key_pressed(pygame.K_d)

    assert fake_maze.moves == [(1, 0)] * 3


def test_release_and_typed_do_nothing(fake_maze):
    controller = Controller(fake_maze)
    controller.key_released(pygame.K_d)
    controller.key_typed("d")

    assert fake_maze.moves == []


def test_handle_event_dispatches_by_type(fake_maze):
    controller = Controller(fake_maze)

    controller.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    controller.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    controller.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="w"))

    assert fake_maze.moves == [(0, -1)]


def test_movement_for_key():
    assert movement_for_key(pygame.K_d) == (1, 0)
    assert movement_for_key(pygame.K_z) == (0, 0)


def test_controller_keeps_player(fake_maze, player):
    controller = Controller(fake_maze, player)
    assert controller.player is player
    assert controller.maze is fake_maze
