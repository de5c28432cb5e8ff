"""Per-data-set accumulation of competitor points.

A LeagueTable lives for exactly one data set: lines are added to it as they
are read, and once the set's boundary is reached ranked() turns it into the
sorted league table. A fresh LeagueTable is used for every data set.
"""

from .models import Score


class LeagueTable:
    """Running point totals keyed by normalized competitor name."""

    def __init__(self):
        self._scores: dict[str, Score] = {}

    def add(self, name: str, points: int):
        """Add points to a competitor, creating the record on first sight."""
        score = self._scores.get(name)
        if score is None:
            self._scores[name] = Score(name, points)
        else:
            score.add_points(points)

    def __len__(self):
        return len(self._scores)

    def ranked(self) -> list[Score]:
        """Return the league table, highest points first."""
        return rank_scores(self._scores.values())


def rank_scores(scores) -> list[Score]:
    """Sort scores by descending points, breaking ties by ascending name."""
    return sorted(scores, key=Score.sort_key)
