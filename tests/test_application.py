import uuid

import pytest

from footballsim.application import (
    ClubRepository,
    CreateNation,
    CreateNationCommand,
    CreatePlayerCommand,
    FindNationById,
    FindNationByIdCommand,
    ListAllNations,
    NationRepository,
    PlayerRepository,
)
from footballsim.errors import (
    ApplicationError,
    DomainViolation,
    EntityNotFoundError,
    PersistenceError,
)
from footballsim.ids import NationId
from footballsim.names import NationName
from footballsim.nation import Nation
from footballsim.reputation import Reputation


class InMemoryNations(NationRepository):
    def __init__(self):
        self.nations = {}

    def save(self, nation):
        self.nations[nation.id] = nation

    def find_by_id(self, nation_id):
        return self.nations.get(nation_id)

    def list_all(self):
        return list(self.nations.values())


class FailingNations(InMemoryNations):
    def save(self, nation):
        raise PersistenceError("disk full")


@pytest.fixture
def repo():
    return InMemoryNations()


def test_create_nation_saves_and_returns_id(repo):
    nation_id = CreateNation(repo).execute(CreateNationCommand("Spain", 100))
    assert isinstance(nation_id, NationId)
    saved = repo.nations[nation_id]
    assert saved.id == nation_id
    assert saved.name.value == "Spain"
    assert saved.reputation.value == 100


def test_create_nation_trims_name(repo):
    nation_id = CreateNation(repo).execute(CreateNationCommand("  Brazil  ", 50))
    assert repo.nations[nation_id].name.value == "Brazil"


@pytest.mark.parametrize("reputation", [0, 101])
def test_create_nation_invalid_reputation_is_domain_violation(repo, reputation):
    with pytest.raises(DomainViolation) as info:
        CreateNation(repo).execute(CreateNationCommand("Spain", reputation))
    assert str(info.value) == "Domain violation: A validation error has occurred."
    assert repo.nations == {}


def test_create_nation_empty_name_is_domain_violation(repo):
    with pytest.raises(DomainViolation):
        CreateNation(repo).execute(CreateNationCommand("   ", 10))
    assert repo.nations == {}


def test_create_nation_propagates_repository_failure():
    with pytest.raises(PersistenceError) as info:
        CreateNation(FailingNations()).execute(CreateNationCommand("Spain", 10))
    assert str(info.value) == "Persistence failure: disk full"


def test_find_nation_by_id_returns_saved_nation(repo):
    nation_id = CreateNation(repo).execute(CreateNationCommand("Italy", 80))
    found = FindNationById(repo).execute(FindNationByIdCommand(nation_id.value))
    assert found is repo.nations[nation_id]


def test_find_nation_by_id_missing_raises(repo):
    missing = uuid.uuid4()
    with pytest.raises(EntityNotFoundError) as info:
        FindNationById(repo).execute(FindNationByIdCommand(missing))
    assert str(info.value) == (
        f"Entity not found: A nation with ID {missing} was not found."
    )
    assert isinstance(info.value, ApplicationError)


def test_list_all_nations_empty(repo):
    assert ListAllNations(repo).execute() == []


def test_list_all_nations_returns_every_nation(repo):
    first = Nation(NationName("France"), Reputation(90))
    second = Nation(NationName("Germany"), Reputation(85))
    repo.save(first)
    repo.save(second)
    result = ListAllNations(repo).execute()
    assert [n.id for n in result] == [first.id, second.id]


def test_repositories_cannot_be_instantiated_without_methods():
    class PartialClubs(ClubRepository):
        def save(self, club):
            pass

    with pytest.raises(TypeError):
        NationRepository()
    with pytest.raises(TypeError):
        PlayerRepository()
    with pytest.raises(TypeError):
        PartialClubs()


def test_commands_are_value_objects():
    nation = uuid.uuid4()
    a = CreatePlayerCommand("Doe", "John", nation, "CM", 0.25, "01-01-2000", "{}")
    b = CreatePlayerCommand("Doe", "John", nation, "CM", 0.25, "01-01-2000", "{}")
    assert a == b
    assert a.last_name == "Doe"
    assert a.first_name == "John"
    with pytest.raises(AttributeError):
        a.position = "ST"