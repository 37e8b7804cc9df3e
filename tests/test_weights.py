import pytest

from footballsim.attributes import (
    Attribute,
    FieldAttributes,
    GoalkeeperAttributes,
    GoalkeepingAttributes,
    MentalAttributes,
    PhysicalAttributes,
    TechnicalAttributes,
)
from footballsim.position import Position
from footballsim.weights import PositionWeights


def _field(rating):
    return FieldAttributes(
        mental=MentalAttributes(rating, rating, rating),
        physical=PhysicalAttributes(rating, rating, rating),
        technical=TechnicalAttributes(rating, rating, rating, rating, rating),
    )


def _keeper(rating):
    return GoalkeeperAttributes(
        mental=MentalAttributes(rating, rating, rating),
        physical=PhysicalAttributes(rating, rating, rating),
        technical=GoalkeepingAttributes(rating, rating, rating, rating, rating),
    )


def test_position_weights_should_sum_to_one():
    weights = PositionWeights.for_position(Position.CM)
    assert abs(weights.total_weights() - 1.0) < 1e-6
    assert weights.is_valid()


@pytest.mark.parametrize("position", list(Position))
def test_every_position_is_valid(position):
    weights = PositionWeights.for_position(position)
    assert weights.is_valid()
    assert weights.position is position


def test_weights_cover_every_attribute_in_order():
    weights = PositionWeights.for_position(Position.ST)
    assert list(weights.weights) == list(Attribute)


def test_pinned_weights():
    assert PositionWeights.for_position(Position.GK).weights[Attribute.REFLEXES] == 0.25
    assert PositionWeights.for_position(Position.ST).weights[Attribute.FINISHING] == 0.25
    assert PositionWeights.for_position(Position.RW).weights[Attribute.PACE] == 0.20
    assert PositionWeights.for_position(Position.CM).weights[Attribute.KICKING] == 0.0


def test_mirrored_positions_share_weights():
    left = PositionWeights.for_position(Position.LB).weights
    right = PositionWeights.for_position(Position.RB).weights
    assert left == right


def test_modified_weights_are_invalid():
    weights = PositionWeights.for_position(Position.AM)
    weights.weights[Attribute.PACE] += 0.1
    assert weights.is_valid() is False


@pytest.mark.parametrize("position", [p for p in Position if p is not Position.GK])
def test_perfect_field_player_rates_full_weight(position):
    weights = PositionWeights.for_position(position)
    assert weights.calculate_ability(_field(100)) == pytest.approx(weights.total_weights())


def test_perfect_goalkeeper_rates_full_weight():
    weights = PositionWeights.for_position(Position.GK)
    assert weights.calculate_ability(_keeper(100)) == pytest.approx(1.0)


def test_zero_rated_player_scores_zero():
    weights = PositionWeights.for_position(Position.CB)
    assert weights.calculate_ability(_field(0)) == 0.0


def test_ability_scales_linearly():
    weights = PositionWeights.for_position(Position.DM)
    assert weights.calculate_ability(_field(50)) == pytest.approx(
        weights.calculate_ability(_field(100)) / 2
    )


def test_goalkeeper_weights_ignore_missing_keeper_skills_on_field_player():
    weights = PositionWeights.for_position(Position.GK)
    assert weights.calculate_ability(_field(100)) < weights.calculate_ability(_keeper(100))