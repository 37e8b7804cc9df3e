import uuid

import pytest

from footballsim.ids import ClubId, ContractId, NationId, PlayerId, SeasonId


@pytest.mark.parametrize("cls", [ClubId, NationId, PlayerId, ContractId, SeasonId])
def test_generate_produces_unique_ids(cls):
    ids = {cls.generate() for _ in range(50)}
    assert len(ids) == 50


def test_str_is_uuid_text():
    raw = uuid.uuid4()
    assert str(NationId(raw)) == str(raw)


def test_same_uuid_same_kind_is_equal():
    raw = uuid.uuid4()
    first, second = ClubId(raw), ClubId(raw)
    assert first.value == raw
    assert len({first, second}) == 1


def test_different_kinds_are_not_equal():
    raw = uuid.uuid4()
    assert (ClubId(raw) == NationId(raw)) is False


def test_generate_returns_requested_kind():
    generated = PlayerId.generate()
    assert type(generated) is PlayerId
    assert generated.value.version == 4