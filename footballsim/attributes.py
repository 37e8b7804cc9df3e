"""Player attributes and the names used to address them."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Mapping, Optional


class Attribute(Enum):
    """Every rated attribute, in canonical order."""

    VISION = "vision"
    COMPOSURE = "composure"
    POSITIONING = "positioning"
    PACE = "pace"
    STAMINA = "stamina"
    STRENGTH = "strength"
    PASSING = "passing"
    HEADING = "heading"
    TACKLING = "tackling"
    DRIBBLING = "dribbling"
    FINISHING = "finishing"
    KICKING = "kicking"
    HANDLING = "handling"
    REFLEXES = "reflexes"
    AERIAL_REACH = "aerial_reach"


@dataclass(frozen=True)
class MentalAttributes:
    vision: int
    composure: int
    positioning: int


@dataclass(frozen=True)
class PhysicalAttributes:
    pace: int
    stamina: int
    strength: int


@dataclass(frozen=True)
class TechnicalAttributes:
    passing: int
    heading: int
    tackling: int
    dribbling: int
    finishing: int


@dataclass(frozen=True)
class GoalkeepingAttributes:
    kicking: int
    handling: int
    reflexes: int
    positioning: int
    aerial_reach: int


@dataclass(frozen=True)
class AttributeWeight:
    """How much one attribute counts towards a rating."""

    attribute: Attribute
    weight: float


_SHARED_FIELDS: Mapping[Attribute, tuple[str, str]] = {
    Attribute.VISION: ("mental", "vision"),
    Attribute.COMPOSURE: ("mental", "composure"),
    Attribute.POSITIONING: ("mental", "positioning"),
    Attribute.PACE: ("physical", "pace"),
    Attribute.STAMINA: ("physical", "stamina"),
    Attribute.STRENGTH: ("physical", "strength"),
}


@dataclass(frozen=True)
class PlayerAttributes:
    """Attributes common to every player; see the field and goalkeeper kinds."""

    mental: MentalAttributes
    physical: PhysicalAttributes

    _technical_fields: ClassVar[Mapping[Attribute, str]] = {}

    def get_attribute_value(self, attribute: Attribute) -> Optional[int]:
        """The rating for an attribute, or None if this kind of player lacks it."""
        shared = _SHARED_FIELDS.get(attribute)
        if shared is not None:
            group, name = shared
            return getattr(getattr(self, group), name)
        name = self._technical_fields.get(attribute)
        if name is None:
            return None
        return getattr(self.technical, name)


@dataclass(frozen=True)
class FieldAttributes(PlayerAttributes):
    """Attributes of an outfield player."""

    technical: TechnicalAttributes

    _technical_fields = {
        Attribute.PASSING: "passing",
        Attribute.HEADING: "heading",
        Attribute.TACKLING: "tackling",
        Attribute.DRIBBLING: "dribbling",
        Attribute.FINISHING: "finishing",
    }


@dataclass(frozen=True)
class GoalkeeperAttributes(PlayerAttributes):
    """Attributes of a goalkeeper."""

    technical: GoalkeepingAttributes

    _technical_fields = {
        Attribute.KICKING: "kicking",
        Attribute.HANDLING: "handling",
        Attribute.REFLEXES: "reflexes",
        Attribute.AERIAL_REACH: "aerial_reach",
    }