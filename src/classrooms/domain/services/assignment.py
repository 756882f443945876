"""Occupant-to-desk assignment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..value_objects import AgentAssignment, DeskSlot

logger = logging.getLogger(__name__)

__all__ = ["AgentAssignmentService", "AgentRequest"]


@dataclass(frozen=True)
class AgentRequest:
    """A manually configured occupant.

    Every field is optional; missing identifiers are generated from the
    occupant's index.
    """

    agent_id: str | None = None
    agent_name: str | None = None
    desk_id: str | None = None


class AgentAssignmentService:
    """Binds occupants to desks in grid order.

    For each desk, the request naming that desk wins; otherwise the
    request at the same index is used unless it names another desk;
    otherwise an occupant is generated as ``student_{index}``.
    """

    def assign(
        self,
        desks: list[DeskSlot],
        occupant_count: int,
        requests: list[AgentRequest] | None = None,
    ) -> list[AgentAssignment]:
        requests = requests or []
        by_desk = {r.desk_id: r for r in requests if r.desk_id}

        assignments: list[AgentAssignment] = []
        for index, desk in enumerate(desks[:occupant_count]):
            request = by_desk.get(desk.desk_id)
            if request is None and index < len(requests):
                # Requests naming a desk bind only to that desk.
                if not requests[index].desk_id:
                    request = requests[index]

            if request is None:
                name = f"Student_{index}"
                agent_id = f"student_{index}"
            else:
                identifier = request.agent_name or str(index)
                name = identifier
                agent_id = request.agent_id or f"student_{identifier}"

            assignments.append(AgentAssignment(agent_id=agent_id, agent_name=name, desk=desk))
            logger.debug(f"Assigned {agent_id} to {desk.desk_id}")

        ids = [a.agent_id for a in assignments]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            logger.warning(f"Duplicate agent ids: {', '.join(duplicates)}")

        if len(desks) < occupant_count:
            logger.warning(
                f"Only {len(desks)} desks available for {occupant_count} occupants"
            )
        return assignments
