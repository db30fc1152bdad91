"""Carry a ScoreRecord across the page boundary as URL query parameters."""
import logging
from typing import Dict, Mapping, Union
from urllib.parse import parse_qs, urlencode

from .scoring import ScoreRecord
from .statements import CATEGORIES

logger = logging.getLogger(__name__)


def to_params(scores: ScoreRecord) -> Dict[str, str]:
    return {c: str(scores[c]) for c in CATEGORIES}


def encode(scores: ScoreRecord) -> str:
    return urlencode(to_params(scores))


def _as_mapping(flat: Union[str, Mapping]) -> Mapping:
    if isinstance(flat, str):
        return parse_qs(flat.lstrip("?"), keep_blank_values=True)
    return flat


def _first(value):
    # parse_qs and some routers hand back lists
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def decode(flat: Union[str, Mapping]) -> ScoreRecord:
    """Parse the five category totals.

    Missing or malformed values fall back to 0 so a truncated or edited
    link still renders a result page.
    """
    params = _as_mapping(flat)
    totals = {}
    for c in CATEGORIES:
        raw = _first(params.get(c))
        text = "" if raw is None else str(raw).strip()
        value = int(text, 10) if text.isascii() and text.isdigit() else None
        if value is None:
            if raw is not None:
                logger.warning("bad value for %s: %r, using 0", c, raw)
            else:
                logger.warning("missing %s, using 0", c)
            value = 0
        totals[c] = value
    return ScoreRecord(**totals)


def has_scores(flat: Union[str, Mapping]) -> bool:
    params = _as_mapping(flat)
    return any(c in params for c in CATEGORIES)
