"""Base utilities and dependencies for Pydantic AI agents."""

from dataclasses import dataclass
from datetime import datetime

from ventureboard.modules.checklist.facade import ChecklistFacade


@dataclass
class Deps:
    """Dependencies injected into agent RunContext."""

    checklist: ChecklistFacade
    operator_id: str
    current_time: datetime
