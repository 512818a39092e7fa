"""Shared fixtures: small captured rooms built from plan-view poses."""
import math

import pytest

from floorplan.models import OrientedBox, RoomRecordSet


WALL_HEIGHT = 2.5
WALL_DEPTH = 0.2


def make_wall(cx, cz, angle, length):
    return OrientedBox.from_pose((cx, 0.0, cz), angle, (length, WALL_HEIGHT, WALL_DEPTH))


def make_object(category, cx, cz, width, depth, angle=0.0, **kwargs):
    return OrientedBox.from_pose(
        (cx, 0.0, cz), angle, (width, 0.8, depth), category=category, **kwargs,
    )


def rectangle_walls():
    """4 m x 3 m room centered on the origin.

    Projected corners at (+/-200, +/-150) drawing units. Wall order:
    south (0), east (1), north (2), west (3), running counterclockwise.
    """
    return [
        make_wall(0.0, -1.5, 0.0, 4.0),
        make_wall(2.0, 0.0, math.pi / 2, 3.0),
        make_wall(0.0, 1.5, math.pi, 4.0),
        make_wall(-2.0, 0.0, -math.pi / 2, 3.0),
    ]


@pytest.fixture
def rect_room():
    return RoomRecordSet(walls=rectangle_walls())


@pytest.fixture
def split_room():
    """The rectangle plus a diagonal wall from the SW to the NE corner."""
    walls = rectangle_walls()
    walls.append(make_wall(0.0, 0.0, math.atan2(3.0, 4.0), 5.0))
    return RoomRecordSet(walls=walls)


@pytest.fixture
def furnished_room():
    return RoomRecordSet(
        walls=rectangle_walls(),
        doors=[OrientedBox.from_pose((0.0, 1.0, -1.5), 0.0, (0.9, 2.0, 0.1),
                                     confidence="high")],
        windows=[OrientedBox.from_pose((0.0, 1.5, 1.5), math.pi, (1.2, 1.0, 0.1))],
        objects=[
            make_object("CapturedRoom.ObjectCategory.bed", -1.0, 0.5, 1.5, 2.0),
            make_object("CapturedRoom.ObjectCategory.table", 1.0, 0.0, 1.2, 0.8),
            make_object("CapturedRoom.ObjectCategory.storage", 1.5, 1.0, 0.6, 0.4),
        ],
    )
