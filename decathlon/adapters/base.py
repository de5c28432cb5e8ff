"""Abstract base adapter for reading data sets from a results stream."""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    @abstractmethod
    def read_data_set(self, lines) -> list | None:
        """Consume lines up to the next data-set boundary.

        lines is an iterator of raw text lines and is only read forward,
        so successive calls pick up where the previous one stopped.

        Returns the ranked list of Score records for the data set (possibly
        empty), or None when the stream ended with no table to emit.
        """
        pass

    def data_sets(self, lines):
        """Yield ranked tables until the stream ends."""
        lines = iter(lines)
        while True:
            table = self.read_data_set(lines)
            if table is None:
                return
            yield table
