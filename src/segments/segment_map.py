# segment_map.py
"""
Step function sparsa su tutto l'asse dei numeri interi.

La funzione è memorizzata come breakpoint {posizione: valore}: ogni valore
vale dalla sua posizione fino alla successiva (esclusa).
Prima del primo breakpoint, e ovunque se la mappa è vuota, il valore è 0.

Forma canonica:
- nessun breakpoint ripete il valore del predecessore (0 per il primo)

Ogni operazione costa O(breakpoint toccati * log n), mai
O(ampiezza del range): le posizioni dentro un tratto costante non
vengono mai materializzate.
"""

from numbers import Integral
from typing import Dict, Iterator, Optional, Tuple

from sortedcontainers import SortedDict

from segments.errors import InvalidRange
from segments.range_convention import RangeConventionFactory
from segments.segment_config import SegmentMapConfig
from rendering.segment_writer import SegmentWriter
from shared.logger import log_invalid_range, log_mutation


def _is_integer(value) -> bool:
    # bool è sottoclasse di int ma non è una posizione valida
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_range(operation: str, start, end, amount=0) -> Tuple[int, int, int]:
    """
    Valida (from, to, amount) prima di qualsiasi mutazione.

    Args:
        operation: nome dell'operazione (per il log)
        start: bound 'from'
        end: bound 'to'
        amount: valore da applicare

    Returns:
        (start, end, amount) convertiti a int

    Raises:
        InvalidRange: bound non interi o from > to
        TypeError: amount non intero
    """
    if not _is_integer(start) or not _is_integer(end):
        reason = 'bounds must be integers'
        log_invalid_range(operation, start, end, reason)
        raise InvalidRange(start, end, reason)

    if start > end:
        reason = "'from' is greater than 'to'"
        log_invalid_range(operation, start, end, reason)
        raise InvalidRange(start, end, reason)

    if not _is_integer(amount):
        raise TypeError(
            f"amount deve essere un intero, ricevuto: {type(amount).__name__}"
        )

    return int(start), int(end), int(amount)


class SegmentMap:
    """
    Step function intera, sparsa, su tutto l'asse dei numeri interi.

    Supporta:
    - add(from, to, amount): somma amount su ogni posizione del range
    - set(from, to, amount): sovrascrive il valore su ogni posizione del range
    - render(): breakpoint canonici in ordine crescente

    Examples:
        >>> segments = SegmentMap()
        >>> str(segments.add(1, 5, 10))
        '1: 10, 5: 0'
        >>> str(segments.add(4, 8, 5))
        '1: 10, 4: 15, 5: 5, 8: 0'
        >>> str(segments.set(3, 4, 5))
        '1: 10, 3: 5, 4: 15, 5: 5, 8: 0'
    """

    _writer = SegmentWriter()

    def __init__(self, config: Optional[SegmentMapConfig] = None):
        """
        Args:
            config: SegmentMapConfig (default: range semi-aperti [from, to))
        """
        self.config = config or SegmentMapConfig()
        self.convention = RangeConventionFactory.create(self.config.end_mode)
        self._breakpoints = SortedDict()

    # =========================================================================
    # MUTAZIONI
    # =========================================================================

    def add(self, start: int, end: int, amount: int) -> 'SegmentMap':
        """
        Somma amount a ogni posizione del range.

        Args:
            start: 'from', intero
            end: 'to', intero >= start
            amount: intero (anche negativo o zero)

        Returns:
            self (chaining)

        Raises:
            InvalidRange: se from > to o i bound non sono interi
        """
        start, end, amount = validate_range('add', start, end, amount)
        boundary = self.convention.end_boundary(start, end)

        if boundary <= start or amount == 0:
            return self

        self._split(start)
        self._split(boundary)

        for position in list(self._breakpoints.irange(start, boundary, inclusive=(True, False))):
            self._breakpoints[position] += amount

        self._canonicalize_around(start, boundary)
        log_mutation('add', start, end, amount, len(self._breakpoints))
        return self

    def set(self, start: int, end: int, amount: int) -> 'SegmentMap':
        """
        Sovrascrive con amount ogni posizione del range.

        I breakpoint interni al range vengono rimossi: restano solo
        start -> amount e boundary -> valore che c'era al boundary.

        Returns:
            self (chaining)

        Raises:
            InvalidRange: se from > to o i bound non sono interi
        """
        start, end, amount = validate_range('set', start, end, amount)
        boundary = self.convention.end_boundary(start, end)

        if boundary <= start:
            return self

        value_at_boundary = self._value_at(boundary)

        for position in list(self._breakpoints.irange(start, boundary)):
            del self._breakpoints[position]

        self._breakpoints[start] = amount
        self._breakpoints[boundary] = value_at_boundary

        self._canonicalize_around(start, boundary)
        log_mutation('set', start, end, amount, len(self._breakpoints))
        return self

    def clear(self) -> 'SegmentMap':
        """Riporta la mappa allo stato vuoto (valore 0 ovunque)."""
        self._breakpoints.clear()
        return self

    def canonicalize(self) -> 'SegmentMap':
        """
        Passata globale: rimuove ogni breakpoint uguale al predecessore.

        add/set mantengono già la forma canonica localmente; questo
        metodo resta disponibile per verifiche e dati importati.
        """
        previous = 0
        for position in list(self._breakpoints):
            value = self._breakpoints[position]
            if value == previous:
                del self._breakpoints[position]
            else:
                previous = value
        return self

    # =========================================================================
    # QUERY
    # =========================================================================

    def render(self) -> Iterator[Tuple[int, int]]:
        """
        Breakpoint (position, value) in ordine crescente.

        Generatore: ogni chiamata riparte dall'inizio. Non modificare
        la mappa mentre lo si consuma.
        """
        for position, value in self._breakpoints.items():
            yield position, value

    @property
    def breakpoints(self) -> Dict[int, int]:
        """Copia dei breakpoint come dict ordinato."""
        return dict(self._breakpoints.items())

    def copy(self) -> 'SegmentMap':
        clone = SegmentMap(self.config)
        clone._breakpoints = self._breakpoints.copy()
        return clone

    # =========================================================================
    # HELPER INTERNI
    # =========================================================================

    def _value_at(self, position: int) -> int:
        """Valore della funzione in position (0 prima del primo breakpoint)."""
        index = self._breakpoints.bisect_right(position)
        if index == 0:
            return 0
        return self._breakpoints.peekitem(index - 1)[1]

    def _value_before(self, position: int) -> int:
        """Valore implicato dal predecessore stretto di position."""
        index = self._breakpoints.bisect_left(position)
        if index == 0:
            return 0
        return self._breakpoints.peekitem(index - 1)[1]

    def _split(self, position: int):
        """Inserisce un breakpoint in position senza cambiare la funzione."""
        if position not in self._breakpoints:
            self._breakpoints[position] = self._value_at(position)

    def _canonicalize_around(self, *positions: int):
        # Le posizioni vanno passate in ordine crescente: una rimozione
        # cambia il predecessore di quelle successive.
        for position in positions:
            if position not in self._breakpoints:
                continue
            if self._breakpoints[position] == self._value_before(position):
                del self._breakpoints[position]

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self.render()

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __bool__(self) -> bool:
        return bool(self._breakpoints)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SegmentMap):
            return NotImplemented
        return list(self._breakpoints.items()) == list(other._breakpoints.items())

    __hash__ = None

    def __str__(self) -> str:
        return self._writer.format(self)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}("
            f"end_mode={self.config.end_mode!r}, "
            f"breakpoints={{{self}}})"
        )
