from __future__ import annotations

from dataclasses import dataclass, field

from ..data import ListSession
from ..services.client import ClientAccessor


@dataclass(slots=True)
class ApiState:
    accessor: ClientAccessor = field(default_factory=ClientAccessor)

    def session(self) -> ListSession:
        return self.accessor.get_client()


api_state = ApiState()
