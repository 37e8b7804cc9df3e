import datetime

import pytest

from footballsim.contract import Contract
from footballsim.errors import DomainValidationError, UnknownDomainError
from footballsim.ids import ClubId, PlayerId
from footballsim.money import Currency, Money

START = datetime.date(2024, 7, 1)
END = datetime.date(2027, 6, 30)


def make_contract():
    return Contract(
        ClubId.generate(), PlayerId.generate(), END, START, Money(5000, Currency.EUR)
    )


def test_fields_are_kept():
    contract = make_contract()
    assert contract.start_date == START
    assert contract.end_date == END
    assert contract.weekly_wage == Money(5000, Currency.EUR)


@pytest.mark.parametrize("start", [END, datetime.date(2028, 1, 1)])
def test_start_must_precede_end(start):
    with pytest.raises(DomainValidationError) as info:
        Contract(ClubId.generate(), PlayerId.generate(), END, start, Money(1, Currency.GBP))
    assert info.value.detail == "Contract start date must be strictly before the end date."


def test_extend_end_date():
    contract = make_contract()
    later = datetime.date(2029, 6, 30)
    contract.extend_end_date(later)
    assert contract.end_date == later


@pytest.mark.parametrize("new_end", [END, datetime.date(2026, 6, 30)])
def test_extend_refuses_earlier_or_same(new_end):
    contract = make_contract()
    with pytest.raises(UnknownDomainError):
        contract.extend_end_date(new_end)
    assert contract.end_date == END


def test_update_wage():
    contract = make_contract()
    contract.update_wage(Money(9000, Currency.USD))
    assert contract.weekly_wage == Money(9000, Currency.USD)


def test_contracts_get_distinct_ids():
    ids = {make_contract().id for _ in range(10)}
    assert len(ids) == 10