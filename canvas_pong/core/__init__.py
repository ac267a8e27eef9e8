"""
Core module of Canvas Pong game
"""

from canvas_pong.core.computer import follow_ball
from canvas_pong.core.entities import Ball
from canvas_pong.core.entities import Paddle
from canvas_pong.core.entities import Scores
from canvas_pong.core.geometry import BoundingBox
from canvas_pong.core.geometry import Rect
from canvas_pong.core.geometry import boxes_overlap
from canvas_pong.core.match import Match
from canvas_pong.core.match import MatchState

__all__ = [
    "Ball",
    "Paddle",
    "Scores",
    "BoundingBox",
    "Rect",
    "boxes_overlap",
    "follow_ball",
    "Match",
    "MatchState",
]
