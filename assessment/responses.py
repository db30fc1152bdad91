import logging
import random
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .errors import InvalidRatingError, UnknownStatementError, ValidationError
from .statements import RATING_LABELS, STATEMENTS, by_id

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Please answer this question"

# ResponseSet: statement id -> rating (1..4), None while unanswered
ResponseSet = Dict[int, Optional[int]]


@dataclass(frozen=True)
class FieldRule:
    field: str
    statement_id: int
    message: str = REQUIRED_MESSAGE


def is_unset(value) -> bool:
    """None and blank form strings both mean the statement is unanswered."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_rating(value) -> int:
    """Coerce a form value ("3" or 3) to a rating, rejecting anything outside 1..4."""
    if isinstance(value, bool):
        raise InvalidRatingError(value)
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            raise InvalidRatingError(value)
        value = int(value, 10)
    if not isinstance(value, int) or value not in RATING_LABELS:
        raise InvalidRatingError(value)
    return value


def initialize(statements=STATEMENTS) -> ResponseSet:
    """Every statement present and unanswered."""
    return {s.id: None for s in statements}


def _covering(response_set: ResponseSet, statements) -> ResponseSet:
    return {s.id: response_set.get(s.id) for s in statements}


def set_rating(response_set: ResponseSet, statement_id: int, rating, statements=STATEMENTS) -> ResponseSet:
    """Copy of the set with one statement rated."""
    if statement_id not in by_id(statements):
        raise UnknownStatementError(statement_id)
    out = _covering(response_set, statements)
    out[statement_id] = parse_rating(rating)
    return out


def clear_rating(response_set: ResponseSet, statement_id: int, statements=STATEMENTS) -> ResponseSet:
    if statement_id not in by_id(statements):
        raise UnknownStatementError(statement_id)
    out = _covering(response_set, statements)
    out[statement_id] = None
    return out


def randomize_all(response_set: ResponseSet, rng: Optional[random.Random] = None,
                  statements=STATEMENTS) -> ResponseSet:
    """Uniform 1..4 for every statement; existing answers are ignored."""
    rng = rng or random
    ratings = list(RATING_LABELS)
    out = {s.id: rng.choice(ratings) for s in statements}
    logger.debug("randomized %d ratings", len(out))
    return out


def reset(response_set: ResponseSet, statements=STATEMENTS) -> ResponseSet:
    return initialize(statements)


def answered_count(response_set: ResponseSet) -> int:
    return sum(1 for v in response_set.values() if not is_unset(v))


def progress(response_set: ResponseSet) -> float:
    """Percent (0-100) of statements answered, recomputed on every call."""
    if not response_set:
        return 0.0
    return answered_count(response_set) / len(response_set) * 100


def build_schema(statements=STATEMENTS) -> Dict[str, FieldRule]:
    """One required-field rule per statement, keyed by form field name."""
    return {s.field: FieldRule(field=s.field, statement_id=s.id) for s in statements}


def field_errors(response_set: ResponseSet, schema: Optional[Dict[str, FieldRule]] = None) -> Dict[int, str]:
    schema = schema or build_schema()
    errors = {}
    for rule in schema.values():
        value = response_set.get(rule.statement_id)
        if is_unset(value):
            errors[rule.statement_id] = rule.message
            continue
        try:
            parse_rating(value)
        except InvalidRatingError as e:
            errors[rule.statement_id] = str(e)
    return errors


def validate_complete(response_set: ResponseSet) -> bool:
    return not field_errors(response_set)


def submit(response_set: ResponseSet) -> ResponseSet:
    """Hand back the set unchanged, or raise ValidationError listing unanswered statements."""
    errors = field_errors(response_set)
    if errors:
        logger.warning("submission rejected, %d unanswered", len(errors))
        raise ValidationError(errors)
    logger.info("submission accepted (%d ratings)", len(response_set))
    return response_set


def from_form(values: Mapping[str, str], statements=STATEMENTS) -> ResponseSet:
    """Form values ({"q1": "3", ...}) to a ResponseSet; blanks stay unanswered."""
    out: ResponseSet = {}
    for s in statements:
        raw = values.get(s.field)
        if is_unset(raw):
            out[s.id] = None
        else:
            out[s.id] = parse_rating(raw)
    return out


def to_form(response_set: ResponseSet, statements=STATEMENTS) -> Dict[str, str]:
    return {s.field: ("" if is_unset(response_set.get(s.id)) else str(response_set[s.id])) for s in statements}
