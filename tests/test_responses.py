"""Response collection: ratings, randomize, progress, submission."""
import random

import pytest

from assessment.errors import InvalidRatingError, UnknownStatementError, ValidationError
from assessment.responses import (
    REQUIRED_MESSAGE,
    answered_count,
    build_schema,
    clear_rating,
    field_errors,
    from_form,
    initialize,
    parse_rating,
    progress,
    randomize_all,
    reset,
    set_rating,
    submit,
    to_form,
    validate_complete,
)


def _complete(value=2):
    return {i: value for i in range(1, 16)}


class TestParseRating:
    @pytest.mark.parametrize("raw,expected", [("1", 1), (" 4 ", 4), (3, 3)])
    def test_accepts(self, raw, expected):
        assert parse_rating(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "5", "", "two", "2.5", 0, 5, -1, None, True, 2.0])
    def test_rejects(self, raw):
        with pytest.raises(InvalidRatingError):
            parse_rating(raw)

    def test_invalid_rating_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_rating("9")


class TestCollection:
    def test_initialize_is_all_unset(self):
        rs = initialize()
        assert sorted(rs) == list(range(1, 16))
        assert all(v is None for v in rs.values())

    def test_set_rating_returns_new_set(self):
        rs = initialize()
        rs2 = set_rating(rs, 3, "4")
        assert rs2[3] == 4
        assert rs[3] is None

    def test_set_rating_unknown_statement(self):
        with pytest.raises(UnknownStatementError):
            set_rating(initialize(), 16, 1)

    def test_set_rating_bad_value(self):
        with pytest.raises(InvalidRatingError):
            set_rating(initialize(), 1, "7")

    def test_clear_rating(self):
        rs = clear_rating(set_rating(initialize(), 1, 2), 1)
        assert rs[1] is None

    def test_reset(self):
        assert reset(_complete()) == initialize()

    def test_progress(self):
        rs = initialize()
        assert progress(rs) == 0.0
        rs = set_rating(set_rating(set_rating(rs, 1, 1), 2, 2), 3, 3)
        assert answered_count(rs) == 3
        assert progress(rs) == pytest.approx(20.0)
        assert progress(_complete()) == 100.0


class TestRandomize:
    def test_sets_every_statement(self):
        rs = randomize_all(initialize())
        assert sorted(rs) == list(range(1, 16))
        assert all(v in (1, 2, 3, 4) for v in rs.values())

    def test_ignores_previous_values(self):
        rng = random.Random(7)
        seen = set()
        rs = _complete(1)
        for _ in range(20):
            rs = randomize_all(rs, rng=rng)
            seen.add(tuple(rs.values()))
        assert len(seen) > 1

    def test_seeded_rng_is_reproducible(self):
        a = randomize_all(initialize(), rng=random.Random(42))
        b = randomize_all(initialize(), rng=random.Random(42))
        assert a == b


class TestSchemaAndSubmit:
    def test_schema_has_one_required_field_per_statement(self):
        schema = build_schema()
        assert list(schema) == [f"q{i}" for i in range(1, 16)]
        assert schema["q4"].statement_id == 4
        assert schema["q4"].message == REQUIRED_MESSAGE

    def test_field_errors_in_statement_order(self):
        rs = set_rating(initialize(), 1, 3)
        errors = field_errors(rs)
        assert list(errors) == list(range(2, 16))
        assert errors[2] == REQUIRED_MESSAGE

    def test_validate_complete(self):
        assert validate_complete(_complete())
        assert not validate_complete(clear_rating(_complete(), 9))

    def test_submit_complete_returns_same_set(self):
        rs = _complete(3)
        assert submit(rs) is rs

    def test_submit_incomplete_names_first_missing(self):
        rs = clear_rating(clear_rating(_complete(), 11), 6)
        with pytest.raises(ValidationError) as exc:
            submit(rs)
        assert exc.value.missing == [6, 11]
        assert "q6" in str(exc.value)
        assert exc.value.errors[11] == REQUIRED_MESSAGE


class TestFormBoundary:
    def test_from_form(self):
        values = {f"q{i}": "2" for i in range(1, 16)}
        values["q5"] = ""
        del values["q6"]
        rs = from_form(values)
        assert rs[1] == 2
        assert rs[5] is None
        assert rs[6] is None

    def test_from_form_rejects_bad_value(self):
        with pytest.raises(InvalidRatingError):
            from_form({"q1": "9"})

    def test_to_form(self):
        form = to_form(set_rating(initialize(), 2, 4))
        assert form["q2"] == "4"
        assert form["q1"] == ""


class TestBlankFormValues:
    """Blank strings count as unanswered, like None."""

    def test_field_errors_blank_string_is_required_message(self):
        rs = {i: "2" for i in range(1, 16)}
        rs[3] = ""
        rs[8] = "  "
        assert field_errors(rs) == {3: REQUIRED_MESSAGE, 8: REQUIRED_MESSAGE}

    def test_progress_ignores_blank_strings(self):
        rs = {i: "" for i in range(1, 16)}
        rs[1] = "4"
        assert answered_count(rs) == 1

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidRatingError):
            parse_rating("\u0663")


class TestPartialInput:
    """Operations cover every statement, not only the keys passed in."""

    def test_randomize_fills_all_statements(self):
        rs = randomize_all({1: None})
        assert sorted(rs) == list(range(1, 16))
        assert all(v in (1, 2, 3, 4) for v in rs.values())

    def test_set_rating_on_empty_set(self):
        rs = set_rating({}, 1, 2)
        assert rs[1] == 2
        assert sorted(rs) == list(range(1, 16))
        assert rs[2] is None

    def test_set_rating_still_rejects_unknown_id(self):
        with pytest.raises(UnknownStatementError):
            set_rating({99: None}, 99, 1)

    def test_clear_rating_on_empty_set(self):
        rs = clear_rating({}, 4)
        assert rs == initialize()

    def test_reset_covers_all_statements(self):
        assert reset({2: 3}) == initialize()
