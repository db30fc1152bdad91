from dataclasses import dataclass
from typing import Dict, Tuple

CATEGORIES = ("collaborating", "competing", "avoiding", "accommodating", "compromising")

DISPLAY_NAMES = {c: c.capitalize() for c in CATEGORIES}

RATING_LABELS: Dict[int, str] = {1: "Rarely", 2: "Sometimes", 3: "Often", 4: "Always"}
MAX_RATING = max(RATING_LABELS)


@dataclass(frozen=True)
class Statement:
    id: int
    text: str
    category: str

    @property
    def field(self) -> str:
        return f"q{self.id}"


STATEMENTS: Tuple[Statement, ...] = tuple(
    Statement(i, text, cat)
    for i, (text, cat) in enumerate(
        [
            ("I discuss issues with others to try to find solutions that meet everyone's needs.", "collaborating"),
            ("I try to negotiate and use a give-and-take approach to problem situations.", "compromising"),
            ("I try to meet the expectations of others.", "accommodating"),
            ("I would argue my case and insist on the advantages of my point of view.", "competing"),
            ("When there is a disagreement, I gather as much information as I can and keep the lines of communication open.", "collaborating"),
            ("When I find myself in an argument, I usually say very little and try to leave as soon as possible.", "avoiding"),
            ("I try to see conflicts from both sides. What do I need? What does the other person need? What are the issues involved?", "collaborating"),
            ("I prefer to compromise when solving problems and just move on.", "compromising"),
            ("I find conflicts exhilarating; I enjoy the battle of wits that usually follows.", "competing"),
            ("Being in a disagreement with other people makes me feel uncomfortable and anxious.", "avoiding"),
            ("I try to meet the wishes of my friends and family.", "accommodating"),
            ("I can figure out what needs to be done and I am usually right.", "competing"),
            ("To break deadlocks, I would meet people halfway.", "compromising"),
            ("I may not get what I want but it's a small price to pay for keeping the peace.", "accommodating"),
            ("I avoid hard feelings by keeping my disagreements with others to myself.", "avoiding"),
        ],
        start=1,
    )
)


def by_id(statements=STATEMENTS) -> Dict[int, Statement]:
    return {s.id: s for s in statements}


def category_counts(statements=STATEMENTS) -> Dict[str, int]:
    counts = {c: 0 for c in CATEGORIES}
    for s in statements:
        counts[s.category] += 1
    return counts
