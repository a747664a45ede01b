# src/rendering/segment_writer.py
"""
SegmentWriter: formattazione testuale dei breakpoint.
Separato dalla logica della SegmentMap.
"""
from typing import Iterable, Tuple


class SegmentWriter:
    """
    Formatta una sequenza di breakpoint (position, value) in testo.

    Il formato di default è quello di riferimento:
        "1: 10, 4: 15, 5: 5, 8: 0"
    Una mappa vuota produce la stringa vuota.
    """

    DEFAULT_SEPARATOR = ', '
    DEFAULT_PAIR_FORMAT = '{key}: {value}'

    def __init__(self, separator: str = DEFAULT_SEPARATOR,
                 pair_format: str = DEFAULT_PAIR_FORMAT):
        """
        Args:
            separator: stringa inserita tra due breakpoint
            pair_format: template con i campi {key} e {value}
        """
        self.separator = separator
        self.pair_format = pair_format

    def format(self, segment_map) -> str:
        """Formatta qualsiasi oggetto con un metodo render()."""
        return self.format_pairs(segment_map.render())

    def format_pairs(self, pairs: Iterable[Tuple[int, int]]) -> str:
        return self.separator.join(
            self.pair_format.format(key=key, value=value)
            for key, value in pairs
        )
