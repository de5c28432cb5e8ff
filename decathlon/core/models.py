"""Data models for the decathlon league table system."""

from dataclasses import dataclass


@dataclass
class RunConfig:
    """Configuration for a single processing run."""
    input_path: str = 'Decathlon.dat'    # line-oriented results file
    output_path: str = 'Decathlon.out'   # league tables are written here
    encoding: str = 'utf-8'
    marker: str = '#'                    # "#" closes a data set, "##" ends the run
    field_width: int = 25                # minimum width of name + points


@dataclass
class Score:
    """A competitor's normalized name and running point total.

    Mutable while a data set is being read, so not usable as a dict key.
    """
    name: str
    points: int = 0

    def add_points(self, points: int):
        self.points += points

    def sort_key(self) -> tuple:
        """Descending points, then ascending name."""
        return (-self.points, self.name)


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one measurement.

    failure is None on success, otherwise 'unsupported_event' or
    'out_of_range'.
    """
    points: int = 0
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
