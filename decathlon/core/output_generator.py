"""League table output.

Tables are written one competitor per line, name on the left and points on
the right of a fixed-width field. Each table after the first is preceded by
two line breaks, so an empty line separates them. No newline follows the
last line of the output.
"""

import logging

from .models import RunConfig, Score
from ..adapters.results_adapter import ResultsAdapter

logger = logging.getLogger(__name__)


FIELD_WIDTH = RunConfig.field_width


def format_entry(score: Score, width: int = FIELD_WIDTH) -> str:
    """Left-justify the name and right-justify the points within width.

    Names too long for the field are followed directly by the points.
    """
    points = str(score.points)
    pad = width - len(score.name) - len(points)
    return score.name + ' ' * pad + points


def write_table(scores: list[Score], writer, width: int = FIELD_WIDTH):
    """Write one ranked table. An empty table writes nothing."""
    writer.write('\n'.join(format_entry(s, width) for s in scores))


def process_file(reader, writer, config: RunConfig | None = None) -> int:
    """Read every data set from reader and write its league table.

    Args:
        reader: Iterable of input lines (e.g. an open text file).
        writer: Object with a write() method receiving the output text.
        config: RunConfig for marker and field width (defaults if omitted).

    Returns:
        The number of tables written.
    """
    config = config or RunConfig()
    adapter = ResultsAdapter(marker=config.marker)

    count = 0
    for scores in adapter.data_sets(reader):
        if count:
            writer.write('\n\n')
        write_table(scores, writer, config.field_width)
        count += 1
        logger.info("Table %d: %d competitors", count, len(scores))

    writer.flush()
    return count
