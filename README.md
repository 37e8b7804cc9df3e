# footballsim

This package holds the domain model for a football management simulator. It
covers nations, clubs, players, contracts, competitions, fixtures and seasons.
It also has a small application layer with commands, abstract repository
interfaces and use cases for nations.

Value objects and entities check their input when they are built. Invalid input
raises a subclass of `footballsim.errors.DomainError`. The application layer
turns these errors into `footballsim.errors.DomainViolation`, which is an
`ApplicationError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `footballsim.errors` | `DomainError` (`EntityNotFound`, `DomainValidationError`, `UnknownDomainError`), `ApplicationError` and its subclasses, `from_domain_error` |
| `footballsim.ids` | `EntityId.generate()` and the typed ids `ClubId`, `CompetitionId`, `FixtureId`, `NationId`, `PlayerId`, `ContractId`, `SeasonId` |
| `footballsim.reputation` | `Reputation`, which must be from 1 to 100 |
| `footballsim.money` | `Currency` and `Money` (`add`, `subtract`, `multiply`, `zero`, and the `+` and `-` operators) |
| `footballsim.names` | `ClubName`, `ClubAbbreviation`, `CompetitionName`, `NationName`, `PlayerName` |
| `footballsim.growth_potential` | `GrowthPotential`, from 0.0 to 1.0 |
| `footballsim.position` | `Position` and `Position.category()` |
| `footballsim.attributes` | `Attribute`, the attribute groups, and `FieldAttributes` / `GoalkeeperAttributes` |
| `footballsim.weights` | `PositionWeights`, the attribute weights for each position |
| `footballsim.ability` | `PlayerAbility.calculate`, which gives current ability, potential and impact |
| `footballsim.competition_values` | `CompetitionRules`, `StandingRow`, `Standing` |
| `footballsim.fixture_result` | `ClubFixtureStatistics`, `FixtureResult` |
| `footballsim.club`, `nation`, `player`, `contract` | the core entities |
| `footballsim.competition`, `fixture`, `season` | competitions, matches and seasons |
| `footballsim.application` | commands, repository interfaces, and `CreateNation`, `FindNationById`, `ListAllNations` |

## Notes on behaviour

- Names are trimmed. `ClubName` and `CompetitionName` may be at most 100 bytes
  in UTF-8. The trimmed form of `ClubAbbreviation` must be exactly 3 bytes.
- `DomainValidationError` always prints as `A validation error has occurred.`.
  The specific message is kept in its `detail` attribute.
- `Money.add` and `Money.subtract` keep the currency of the left operand.
  `Money.multiply` rounds halves away from zero.
- `Nation.increase_reputation` changes the reputation only when the new value
  is higher.
- `Fixture.record_result` and `Fixture.postpone` raise `UnknownDomainError`
  once the fixture has been played.
- `Contract.extend_end_date` refuses any date that is not later than the
  current end date.
- `Competition` needs at least two participants unless its format is
  `CompetitionType.FRIENDLY`.
- `Season` checks that the start date comes before the end date. It also checks
  that each date falls in the year given for it.

## Example

```python
from datetime import date

from footballsim.attributes import (
    FieldAttributes, MentalAttributes, PhysicalAttributes, TechnicalAttributes,
)
from footballsim.growth_potential import GrowthPotential
from footballsim.ids import NationId
from footballsim.names import PlayerName
from footballsim.player import Player
from footballsim.position import Position
from footballsim.weights import PositionWeights

assert PositionWeights.for_position(Position.CM).is_valid()

player = Player(
    name=PlayerName("John", "Doe"),
    nation=NationId.generate(),
    position=Position.CM,
    growth_potential=GrowthPotential(0.25),
    birth_date=date(2000, 1, 1),
    attributes=FieldAttributes(
        mental=MentalAttributes(vision=70, composure=65, positioning=60),
        physical=PhysicalAttributes(pace=75, stamina=70, strength=68),
        technical=TechnicalAttributes(
            passing=72, heading=50, tackling=65, dribbling=74, finishing=60,
        ),
    ),
)
print(player.name.full_name())            # John Doe
print(player.calculate_age(date(2024, 6, 1)))  # 24
print(player.current_ability(), player.potential_ability())
print(player.calculate_market_value(date(2024, 6, 1)))
```

## Use cases

`CreateNation`, `FindNationById` and `ListAllNations` each take an object that
implements `NationRepository`:

```python
from footballsim.application import (
    CreateNation, CreateNationCommand, FindNationById, FindNationByIdCommand,
    NationRepository,
)


class InMemoryNations(NationRepository):
    def __init__(self):
        self._nations = {}

    def save(self, nation):
        self._nations[nation.id] = nation

    def find_by_id(self, nation_id):
        return self._nations.get(nation_id)

    def list_all(self):
        return list(self._nations.values())


repo = InMemoryNations()
nation_id = CreateNation(repo).execute(CreateNationCommand(name="Spain", reputation=90))
nation = FindNationById(repo).execute(FindNationByIdCommand(id=nation_id.value))
```

If no nation has the given id, `FindNationById` raises `EntityNotFoundError`.
If the name or reputation is invalid, `CreateNation` raises `DomainViolation`.

## What the package does not do

This package is a library only. It has:

- no command-line program or user interface;
- no concrete storage, since `ClubRepository`, `NationRepository` and
  `PlayerRepository` are abstract interfaces that you implement;
- no match engine, so fixture results have to be supplied by the caller.

`CreatePlayerCommand` is defined, but the package has no use case that
consumes it.