"""Training max routes."""

from fastapi import APIRouter, Request

from ...models.weight import parse_pounds
from ...services.tracker import Tracker
from ..schemas import SetTrainingMaxesRequest

router = APIRouter(prefix="/api", tags=["training-maxes"])


def get_tracker(request: Request) -> Tracker:
    """Get the tracker from app state."""
    return request.app.state.tracker


@router.get("/trainingMaxes")
async def training_maxes(request: Request):
    """Current training maxes and smallest denomination."""
    tracker = get_tracker(request)
    tms, smallest_denom = await tracker.training_maxes()
    return {
        "training_maxes": [tm.to_dict() for tm in tms],
        "smallest_denom": smallest_denom.to_dict() if smallest_denom else None,
    }


@router.post("/setTrainingMaxes")
async def set_training_maxes(request: Request, req: SetTrainingMaxesRequest):
    """Set all four training maxes and the smallest denomination at once."""
    tracker = get_tracker(request)
    await tracker.set_training_maxes(
        press=parse_pounds(req.overhead_press),
        squat=parse_pounds(req.squat),
        bench=parse_pounds(req.bench_press),
        deadlift=parse_pounds(req.deadlift),
        smallest_denom=parse_pounds(req.smallest_denom),
    )
    return {"status": "set"}
