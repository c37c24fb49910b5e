"""Exception types shared across stronk."""


class StronkError(Exception):
    """Base class for all stronk errors."""


class ValidationError(StronkError, ValueError):
    """Caller-supplied input was malformed or not allowed."""


class InvalidWeightError(ValidationError):
    """A decimal pounds string could not be parsed into a weight."""


class LiftNotFoundError(StronkError, LookupError):
    """No lift exists with the requested ID."""

    def __init__(self, lift_id: int):
        super().__init__(f"lift {lift_id} not found")
        self.lift_id = lift_id


class NoSmallestDenomError(StronkError, LookupError):
    """The smallest weight denomination has never been configured."""

    def __init__(self):
        super().__init__("no smallest denomination has been set")


class RoutineError(StronkError):
    """The routine definition is malformed."""


class RoutinePositionError(StronkError):
    """Lift history points at a week or day the routine doesn't have.

    Happens when the routine is edited out from under existing history, or
    when a lift was recorded with bad coordinates.
    """


class UnitMismatchError(StronkError):
    """Weights with different units were combined.

    This is a programming error and is never handled.
    """
