"""Playing positions."""

from enum import Enum


class Position(Enum):
    GK = "GK"
    RB = "RB"
    CB = "CB"
    LB = "LB"
    RWB = "RWB"
    LWB = "LWB"
    DM = "DM"
    CM = "CM"
    AM = "AM"
    LM = "LM"
    RM = "RM"
    LW = "LW"
    RW = "RW"
    SS = "SS"
    ST = "ST"

    def category(self) -> str:
        """The broad role group this position belongs to."""
        return _CATEGORIES[self]


_CATEGORIES = {
    Position.GK: "Goalkeeer",
    **dict.fromkeys(
        (Position.RB, Position.CB, Position.LB, Position.RWB, Position.LWB),
        "Defensive",
    ),
    **dict.fromkeys(
        (Position.DM, Position.CM, Position.AM, Position.LM, Position.RM),
        "Midfield",
    ),
    **dict.fromkeys(
        (Position.LW, Position.RW, Position.SS, Position.ST),
        "Attacking",
    ),
}