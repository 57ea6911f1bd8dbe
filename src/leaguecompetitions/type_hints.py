"""Type hints used in League Competitions."""

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from leaguecompetitions.models.competition import Competition, Group, Round

# Opaque participant identifier (player, doubles pair or team)
ParticipantId = str

# A whole schedule
Rounds = List["Round"]

# Group stage output: the groups and an optional plate shell
GroupStage = Tuple[List["Group"], Optional["Competition"]]
# Advancement output: knockout-bound ids and plate-bound ids
Advancement = Tuple[List[ParticipantId], List[ParticipantId]]
