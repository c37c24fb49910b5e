"""Request bodies for the JSON API.

Weights arrive as decimal pound strings ("177.5") and are parsed into
deci-pounds by the routers.
"""

from pydantic import BaseModel, Field

from ..db.engine import SQLITE_MAX_INT
from ..models.lift import Exercise, SetType


class SetTrainingMaxesRequest(BaseModel):
    overhead_press: str
    squat: str
    bench_press: str
    deadlift: str
    smallest_denom: str


class RecordLiftRequest(BaseModel):
    exercise: Exercise
    set_type: SetType
    weight: str
    set: int = Field(ge=0, le=SQLITE_MAX_INT)
    reps: int = Field(ge=0, le=SQLITE_MAX_INT)
    note: str = ""
    day: int = Field(ge=0, le=SQLITE_MAX_INT)
    week: int = Field(ge=0, le=SQLITE_MAX_INT)
    iteration: int = Field(ge=0, le=SQLITE_MAX_INT)
    to_failure: bool = False


class EditLiftRequest(BaseModel):
    id: int = Field(ge=0, le=SQLITE_MAX_INT)
    note: str = ""
    reps: int = Field(ge=0, le=SQLITE_MAX_INT)


class SkipOptionalWeekRequest(BaseModel):
    week: int = Field(ge=0, le=SQLITE_MAX_INT)
    iteration: int = Field(ge=0, le=SQLITE_MAX_INT)
    note: str = ""
