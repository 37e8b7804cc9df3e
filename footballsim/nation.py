"""Nations."""

from dataclasses import dataclass, field

from footballsim.ids import NationId
from footballsim.names import NationName
from footballsim.reputation import Reputation


@dataclass
class Nation:
    """A nation whose reputation can only rise."""

    name: NationName
    reputation: Reputation
    id: NationId = field(default_factory=NationId.generate)

    def increase_reputation(self, new_reputation: Reputation) -> None:
        """Adopt the new reputation only if it is higher than the current one."""
        if new_reputation.value > self.reputation.value:
            self.reputation = new_reputation