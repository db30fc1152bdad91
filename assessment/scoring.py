import logging
from dataclasses import asdict, dataclass
from typing import Dict, List

from .errors import IncompleteResponseError
from .responses import ResponseSet, is_unset, parse_rating
from .statements import CATEGORIES, MAX_RATING, STATEMENTS, category_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreRecord:
    collaborating: int = 0
    competing: int = 0
    avoiding: int = 0
    accommodating: int = 0
    compromising: int = 0

    def __getitem__(self, category: str) -> int:
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    @property
    def total(self) -> int:
        return sum(self.as_dict().values())


def aggregate(responses: ResponseSet, statements=STATEMENTS) -> ScoreRecord:
    """Sum ratings per category; every statement must be answered."""
    missing = [s.id for s in statements if is_unset(responses.get(s.id))]
    if missing:
        raise IncompleteResponseError(missing)
    totals = {c: 0 for c in CATEGORIES}
    for s in statements:
        totals[s.category] += parse_rating(responses[s.id])
    logger.debug("aggregated scores: %s", totals)
    return ScoreRecord(**totals)


def primary_style(scores: ScoreRecord) -> str:
    # max() keeps the first maximum, so ties go to the earlier category
    return max(CATEGORIES, key=lambda c: scores[c])


def rank_styles(scores: ScoreRecord) -> List[str]:
    return sorted(CATEGORIES, key=lambda c: scores[c], reverse=True)


def max_scores(statements=STATEMENTS) -> Dict[str, int]:
    return {c: n * MAX_RATING for c, n in category_counts(statements).items()}
