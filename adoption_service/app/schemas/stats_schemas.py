from typing import Dict

from shared.core.schemas import CamelModel


class StatsOut(CamelModel):
    total_spaces: int
    adopted_spaces: int
    available_spaces: int
    total_raised: int
    total_goal: int
    progress_percentage: float
    volunteers_available: int
    total_adoptions: int
    adoptions_by_status: Dict[str, int]
