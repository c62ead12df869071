from .geometry import Point2D, Vector2D, direction_from_points, intersect_lines
from .building import Wall, Opening, OpeningType, Room, WallSide, WallEndpoint
from .corner import CornerPair, CornerGeometry, CornerSide
from .parameters import EditParams
from .context import GraphHost

__all__ = [
    "Point2D", "Vector2D", "direction_from_points", "intersect_lines",
    "Wall", "Opening", "OpeningType", "Room", "WallSide", "WallEndpoint",
    "CornerPair", "CornerGeometry", "CornerSide",
    "EditParams",
    "GraphHost",
]
