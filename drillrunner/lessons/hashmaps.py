"""Hash maps: fruit baskets and a table of football scores."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import MutableMapping

_GOALS = re.compile(r"\+?[0-9]+")
_GOALS_MAX = 255


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


@dataclass(frozen=True)
class Team:
    """A team and the goals it scored and conceded."""

    name: str
    goals_scored: int
    goals_conceded: int


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 2, "mango": 2}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _GOALS_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Goals scored and conceded per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        home, away = fields[0], fields[1]
        home_goals = _parse_goals(fields[2])
        away_goals = _parse_goals(fields[3])
        for name, scored, conceded in (
            (home, home_goals, away_goals),
            (away, away_goals, home_goals),
        ):
            previous = scores.get(name)
            if previous is not None:
                scored += previous.goals_scored
                conceded += previous.goals_conceded
            if scored > _GOALS_MAX or conceded > _GOALS_MAX:
                raise OverflowError(f"goal total for {name} exceeds {_GOALS_MAX}")
            scores[name] = Team(name=name, goals_scored=scored, goals_conceded=conceded)
    return scores