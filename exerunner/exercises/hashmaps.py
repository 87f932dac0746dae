"""Dictionaries: fruit baskets and a table of football scores."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_GOALS_RANGE = range(0, 256)


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goals scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid goal count {text!r}")
    value = int(text)
    if value not in _GOALS_RANGE:
        raise ValueError(f"goal count {value} is out of range")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores