"""Tests for data models."""

import json
from decimal import Decimal

import pytest

from stronk.data.routine_loader import load_routine, validate_routine
from stronk.errors import InvalidWeightError, RoutineError
from stronk.models.lift import ComparableLifts, Exercise, Lift, SetType
from stronk.models.routine import Movement, Routine, Set, WorkoutDay, WorkoutWeek
from stronk.models.weight import Weight, WeightUnit, parse_pounds, pounds

ROUND_TRIP_WEIGHTS = ["0", "0.5", ".5", "150.", "999.9", "1000000.1"] + [
    f"{whole}.{tenth}" for whole in (0, 1, 45, 100, 135, 315, 999) for tenth in range(10)
] + [str(whole) for whole in range(0, 1000, 37)]


class TestWeight:
    """Tests for the Weight model."""

    def test_str_whole_pounds(self):
        """Whole pounds render without a decimal point."""
        assert str(pounds(1000)) == "100"
        assert str(pounds(0)) == "0"

    def test_str_fractional_pounds(self):
        """A tenth of a pound renders as one decimal place."""
        assert str(pounds(1005)) == "100.5"
        assert str(pounds(5)) == "0.5"

    def test_str_unknown_unit(self):
        """Weights in a unit we don't know render as a marker."""
        assert str(Weight(value=10, unit="KILOS")) == "UNKNOWN_UNIT"

    def test_to_dict(self):
        """Weights serialize as unit and value."""
        assert pounds(1775).to_dict() == {"unit": "DECI_POUNDS", "value": 1775}

    def test_from_dict(self):
        """Weights deserialize from unit and value."""
        weight = Weight.from_dict({"unit": "DECI_POUNDS", "value": 1775})
        assert weight == pounds(1775)
        assert weight.unit == WeightUnit.DECI_POUNDS

    def test_db_encoding(self):
        """Weights are stored as value:UNIT."""
        assert pounds(1775).to_db() == "1775:DECI_POUNDS"
        assert Weight.from_db("1775:DECI_POUNDS") == pounds(1775)

    @pytest.mark.parametrize(
        "encoded",
        ["1775", "1775:DECI_POUNDS:extra", "abc:DECI_POUNDS", "1775:KILOS"],
    )
    def test_db_decoding_rejects_malformed(self, encoded):
        """Malformed stored weights raise ValueError."""
        with pytest.raises(ValueError):
            Weight.from_db(encoded)

    def test_ordering(self):
        """Weights of one unit compare by value."""
        assert pounds(900) < pounds(1000)


class TestParsePounds:
    """Tests for parse_pounds."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("150", 1500),
            ("150.5", 1505),
            ("150.", 1500),
            (".5", 5),
            ("0.5", 5),
            ("0", 0),
            (" 177.5 ", 1775),
        ],
    )
    def test_valid(self, text, expected):
        """Decimal pound strings parse to deci-pounds."""
        assert parse_pounds(text) == pounds(expected)

    @pytest.mark.parametrize(
        "text",
        ["", ".", "abc", "-1", "100.-9", "100.12", "1.25", "+5", "1_0", "1.5.5"],
    )
    def test_invalid(self, text):
        """Anything else is rejected."""
        with pytest.raises(InvalidWeightError):
            parse_pounds(text)

    def test_invalid_is_value_error(self):
        """Parse failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_pounds("nope")

    def test_too_many_digits(self):
        """Absurdly long digit strings are a parse error, not a crash."""
        assert parse_pounds("9" * 15) == pounds(int("9" * 15) * 10)
        with pytest.raises(InvalidWeightError, match="too long"):
            parse_pounds("1" * 16)
        with pytest.raises(InvalidWeightError, match="too long"):
            parse_pounds("1" * 5000)
        with pytest.raises(InvalidWeightError, match="too long"):
            parse_pounds("0." + "1" * 5000)

    @pytest.mark.parametrize("text", ROUND_TRIP_WEIGHTS)
    def test_render_round_trip(self, text):
        """Rendering a parsed weight keeps its value and parses back the same."""
        rendered = str(parse_pounds(text))

        assert Decimal(rendered) == Decimal(text)
        assert parse_pounds(rendered) == parse_pounds(text)


class TestLift:
    """Tests for the Lift model."""

    def test_lift_dict_round_trip(self):
        """Lifts survive serialization."""
        lift = Lift(
            id=7,
            exercise=Exercise.DEADLIFT,
            set_type=SetType.MAIN,
            weight=pounds(2250),
            set_number=2,
            reps=8,
            day_number=3,
            week_number=0,
            iteration_number=1,
            note="felt good",
            to_failure=True,
        )
        data = lift.to_dict()

        assert data["exercise"] == "DEADLIFT"
        assert data["weight"] == {"unit": "DECI_POUNDS", "value": 2250}
        assert Lift.from_dict(data) == lift

    def test_exercise_display_name(self):
        """Exercise display names are title case."""
        assert Exercise.OVERHEAD_PRESS.display_name == "Overhead Press"

    def test_empty_comparables(self):
        """Empty comparables serialize with nulls."""
        assert ComparableLifts().to_dict() == {
            "closest_weight": None,
            "personal_record": None,
            "pr_equivalent_reps": 0.0,
        }


class TestRoutine:
    """Tests for routine models and loading."""

    def test_routine_dict_round_trip(self, small_routine):
        """Routines survive serialization."""
        assert Routine.from_dict(small_routine.to_dict()) == small_routine

    def test_set_defaults(self):
        """Routine sets carry no resolved fields."""
        data = Set(5, 65).to_dict()
        assert data["to_failure"] is False
        assert data["weight_target"] is None
        assert data["failure_comparables"] is None
        assert data["associated_lift_id"] is None

    def test_bundled_routine(self):
        """The bundled routine is 5/3/1 with an optional deload."""
        routine = load_routine()

        assert [w.week_name for w in routine.weeks] == [
            "Week 1",
            "Week 2",
            "Week 3",
            "Deload Week",
        ]
        assert [w.optional for w in routine.weeks] == [False, False, False, True]
        assert [d.day_name for d in routine.weeks[0].days] == [
            "Press Day",
            "Squat Day",
            "Bench Day",
            "Deadlift Day",
        ]
        press_day = routine.weeks[0].days[0]
        assert [m.set_type for m in press_day.movements] == [
            SetType.WARMUP,
            SetType.MAIN,
            SetType.ASSISTANCE,
        ]
        assert press_day.movements[1].sets[-1].to_failure

    def test_missing_file(self, tmp_path):
        """A missing routine file is a RoutineError."""
        with pytest.raises(RoutineError):
            load_routine(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        """Unparseable JSON is a RoutineError."""
        path = tmp_path / "routine.json"
        path.write_text("{not json")
        with pytest.raises(RoutineError):
            load_routine(path)

    def test_unknown_exercise(self, tmp_path, small_routine):
        """Unknown enum values are a RoutineError."""
        data = small_routine.to_dict()
        data["weeks"][0]["days"][0]["movements"][0]["exercise"] = "CURL"
        path = tmp_path / "routine.json"
        path.write_text(json.dumps(data))
        with pytest.raises(RoutineError):
            load_routine(path)

    def test_validate_empty_routine(self):
        """A routine needs weeks."""
        with pytest.raises(RoutineError):
            validate_routine(Routine(name="Empty", weeks=[]))

    def test_validate_empty_movement(self):
        """Every movement needs sets."""
        routine = Routine(
            name="Bad",
            weeks=[
                WorkoutWeek(
                    week_name="W",
                    days=[
                        WorkoutDay(
                            day_name="D",
                            movements=[Movement(Exercise.SQUAT, SetType.MAIN, sets=[])],
                        )
                    ],
                )
            ],
        )
        with pytest.raises(RoutineError):
            validate_routine(routine)

    def test_validate_percentage_range(self, small_routine):
        """Percentages must be between 0 and 100."""
        small_routine.weeks[0].days[0].movements[0].sets[0].training_max_percentage = 120
        with pytest.raises(RoutineError):
            validate_routine(small_routine)
