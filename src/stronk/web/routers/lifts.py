"""Lift recording and next-lift routes."""

from fastapi import APIRouter, Path, Query, Request

from ...db.engine import SQLITE_MAX_INT
from ...models.lift import Exercise
from ...models.weight import parse_pounds
from ...services.tracker import Tracker
from ..schemas import EditLiftRequest, RecordLiftRequest, SkipOptionalWeekRequest

router = APIRouter(prefix="/api", tags=["lifts"])


def get_tracker(request: Request) -> Tracker:
    """Get the tracker from app state."""
    return request.app.state.tracker


@router.get("/nextLift")
async def next_lift(request: Request):
    """The next set due, with the rest of the day's workout."""
    tracker = get_tracker(request)
    return (await tracker.next_lift()).to_dict()


@router.post("/recordLift")
async def record_lift(request: Request, req: RecordLiftRequest):
    """Record a completed set and return what's next."""
    tracker = get_tracker(request)
    lift_id, nxt = await tracker.record_lift(
        exercise=req.exercise,
        set_type=req.set_type,
        weight=parse_pounds(req.weight),
        set_number=req.set,
        reps=req.reps,
        note=req.note,
        day=req.day,
        week=req.week,
        iteration=req.iteration,
        to_failure=req.to_failure,
    )
    return {"lift_id": lift_id, "next_lift": nxt.to_dict()}


@router.get("/lift/{lift_id}")
async def get_lift(request: Request, lift_id: int = Path(le=SQLITE_MAX_INT)):
    """A single recorded lift."""
    tracker = get_tracker(request)
    return (await tracker.get_lift(lift_id)).to_dict()


@router.post("/editLift")
async def edit_lift(request: Request, req: EditLiftRequest):
    """Change a recorded lift's note and rep count."""
    tracker = get_tracker(request)
    await tracker.edit_lift(req.id, req.note, req.reps)
    return {"status": "edited", "id": req.id}


@router.post("/skipOptionalWeek")
async def skip_optional_week(request: Request, req: SkipOptionalWeekRequest):
    """Skip an optional week and return what's next."""
    tracker = get_tracker(request)
    nxt = await tracker.skip_optional_week(req.week, req.iteration, req.note)
    return {"next_lift": nxt.to_dict()}


@router.get("/recentLifts")
async def recent_lifts(request: Request, limit: int = Query(100, ge=1, le=1000)):
    """Recently recorded lifts, most recent first."""
    tracker = get_tracker(request)
    return {"lifts": [lift.to_dict() for lift in await tracker.recent_lifts(limit)]}


@router.get("/comparables")
async def comparables(request: Request, exercise: Exercise, weight: str):
    """Closest-weight and PR to-failure lifts for a target weight."""
    tracker = get_tracker(request)
    found = await tracker.comparable_lifts(exercise, parse_pounds(weight))
    return found.to_dict()
