from sqlalchemy import case, func
from sqlalchemy.orm import Session

from ..enum.adoption_enum import ADOPTION_STATUSES
from ..models.adoptions import Adoption
from ..models.spaces import Space
from ..schemas.stats_schemas import StatsOut


def progress_percentage(total_raised: int, total_goal: int) -> float:
    if not total_goal:
        return 0.0
    return 100 * total_raised / total_goal


def get_stats(db: Session) -> StatsOut:
    spaces = (
        db.query(
            func.count(Space.id).label("total_spaces"),
            func.count(case((Space.adopted == True, 1))).label("adopted_spaces"),
            func.coalesce(
                func.sum(case((Space.adopted == True, Space.cost), else_=0)), 0
            ).label("total_raised"),
            func.coalesce(func.sum(Space.cost), 0).label("total_goal"),
        )
        .one()
    )

    adoptions = (
        db.query(
            func.count(Adoption.id).label("total_adoptions"),
            func.count(case((Adoption.wants_to_help == True, 1))).label("volunteers"),
        )
        .one()
    )

    by_status = {status: 0 for status in ADOPTION_STATUSES}
    for status, count in (
        db.query(Adoption.status, func.count(Adoption.id))
        .group_by(Adoption.status)
        .all()
    ):
        by_status[status] = count

    total_spaces = spaces.total_spaces or 0
    adopted_spaces = spaces.adopted_spaces or 0
    total_raised = int(spaces.total_raised or 0)
    total_goal = int(spaces.total_goal or 0)

    return StatsOut(
        total_spaces=total_spaces,
        adopted_spaces=adopted_spaces,
        available_spaces=total_spaces - adopted_spaces,
        total_raised=total_raised,
        total_goal=total_goal,
        progress_percentage=progress_percentage(total_raised, total_goal),
        volunteers_available=adoptions.volunteers or 0,
        total_adoptions=adoptions.total_adoptions or 0,
        adoptions_by_status=by_status,
    )
