"""Adapter for plain-text decathlon result files.

Each content line holds ``<name> <event> <measurement>`` separated by spaces
or tabs; anything after the third token is ignored. A line that is just the
marker (default "#", trailing blanks allowed) closes the current data set,
and a doubled marker ("##") closes it and ends the run. Blank lines are
skipped, and lines that can't be parsed or scored are dropped silently.
"""

import logging
import re
from typing import NamedTuple

from .base import BaseAdapter
from ..core import scorer
from ..core.league_table import LeagueTable

logger = logging.getLogger(__name__)


# Whitespace is space or tab only
_BLANKS = ' \t'
_LINE_TOKENS = re.compile(r'[ \t]*([^ \t]+)[ \t]+([^ \t]+)[ \t]+([^ \t]+)')
# Plain ASCII decimal, or the NaN/Infinity spellings
_MEASUREMENT = re.compile(r'[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)')


class ParsedLine(NamedTuple):
    name: str
    event: str
    measurement: float


def parse_line(line: str) -> ParsedLine | None:
    """Split a content line into (NAME, EVENT, measurement).

    Name and event are uppercased. Returns None if any of the three tokens
    is missing or the measurement is not a number.
    """
    m = _LINE_TOKENS.match(line)
    if not m:
        return None
    name, event, measure = m.groups()
    if not _MEASUREMENT.fullmatch(measure):
        return None
    return ParsedLine(name.upper(), event.upper(), float(measure))


def _strip_newline(line: str) -> str:
    return line.rstrip('\r\n')


class ResultsAdapter(BaseAdapter):
    """Read decathlon data sets and rank each into a league table.

    Args:
        marker: Boundary marker character.
    """

    def __init__(self, marker: str = '#'):
        self.marker = marker
        self.stream_end = marker * 2

    def read_data_set(self, lines) -> list | None:
        table = LeagueTable()
        for raw in lines:
            line = _strip_newline(raw)
            if not line:
                continue
            if line.startswith(self.marker):
                trimmed = line.rstrip(_BLANKS)
                if trimmed == self.marker:
                    logger.debug("Data set closed with %d competitors", len(table))
                    return table.ranked()
                if trimmed == self.stream_end:
                    logger.debug("Stream end marker, dropping %d competitors", len(table))
                    return None
            self._process_line(line, table)

        logger.debug("End of input inside a data set")
        return None

    @staticmethod
    def _process_line(line: str, table: LeagueTable):
        """Score one content line into the table, or drop it."""
        parsed = parse_line(line)
        if parsed is None:
            logger.debug("Skipping malformed line %r", line)
            return

        result = scorer.points(parsed.event, parsed.measurement)
        if result.failure == scorer.UNSUPPORTED_EVENT:
            logger.debug("Skipping unsupported event %r", parsed.event)
            return
        # An out-of-range measurement still enters the competitor, at 0 points
        table.add(parsed.name, result.points)
