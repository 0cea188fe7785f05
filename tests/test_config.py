import pytest
from pydantic import ValidationError

from hexmap import AxialCoordinate, Direction
from hexmap.config import DemoSettings


def test_defaults_walk_back_to_origin():
    settings = DemoSettings()
    assert settings.origin == AxialCoordinate(0, 0)
    assert settings.radius == 1
    assert settings.moves == [Direction.LEFT_UPPER, Direction.DOWN, Direction.RIGHT_UPPER]
    assert settings.destination() == AxialCoordinate(0, 0)


def test_moves_accept_names():
    settings = DemoSettings(origin_q=2, origin_r=-1, moves=["DOWN", "down", "left_lower"])
    assert settings.moves == [Direction.DOWN, Direction.DOWN, Direction.LEFT_LOWER]
    assert settings.destination() == AxialCoordinate(4, 0)


def test_empty_moves_stay_put():
    settings = DemoSettings(origin_q=3, moves=None)
    assert settings.destination() == settings.origin


def test_negative_radius_rejected():
    with pytest.raises(ValidationError):
        DemoSettings(radius=-1)


def test_unknown_direction_rejected():
    with pytest.raises(ValidationError):
        DemoSettings(moves=["sideways"])


def test_bare_string_moves_rejected():
    with pytest.raises(ValidationError):
        DemoSettings(moves="down")


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        DemoSettings(orientation="flat")
