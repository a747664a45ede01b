# range_convention.py
"""
Convenzioni sugli estremi dei range di una SegmentMap.

Design Pattern: Strategy + Factory
- RangeConvention (ABC): converte il range utente (from, to) nel
  boundary esclusivo dove la modifica si ferma
- HalfOpenConvention: [from, to)      -> boundary a to
- InclusiveConvention: [from, to]     -> boundary a to + 1

Il modello a breakpoint lavora sempre su [from, boundary).
"""

from abc import ABC, abstractmethod
from typing import Union


class RangeConvention(ABC):
    """Strategy base per la conversione range -> boundary."""

    name = None

    @abstractmethod
    def end_boundary(self, start: int, end: int) -> int:
        """
        Ritorna la prima posizione NON coperta dal range.

        Args:
            start: bound 'from' (già validato)
            end: bound 'to' (già validato, end >= start)
        """
        pass

    def is_empty(self, start: int, end: int) -> bool:
        """True se il range non copre nessuna posizione."""
        return self.end_boundary(start, end) <= start

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class HalfOpenConvention(RangeConvention):
    """
    Range semi-aperto [from, to).

    add(1, 5, ...) copre 1, 2, 3, 4; range adiacenti
    come [1, 5) e [5, 9) non si sovrappongono mai.
    """

    name = 'exclusive'

    def end_boundary(self, start: int, end: int) -> int:
        return end


class InclusiveConvention(RangeConvention):
    """
    Range chiuso [from, to].

    add(1, 5, ...) copre 1..5 compreso, quindi from == to
    tocca comunque una posizione.
    """

    name = 'inclusive'

    def end_boundary(self, start: int, end: int) -> int:
        return end + 1


class RangeConventionFactory:
    """
    Factory per creare RangeConvention da stringa.

    Supporta:
    - 'exclusive' (alias 'half-open'): HalfOpenConvention
    - 'inclusive' (alias 'closed'): InclusiveConvention

    Case-insensitive.
    """

    _CONVENTION_MAP = {
        'exclusive': HalfOpenConvention,
        'half-open': HalfOpenConvention,
        'inclusive': InclusiveConvention,
        'closed': InclusiveConvention,
    }

    @classmethod
    def create(cls, end_mode: Union[str, RangeConvention]) -> RangeConvention:
        """
        Crea la RangeConvention richiesta.

        Args:
            end_mode: nome della convenzione oppure istanza già creata

        Returns:
            RangeConvention

        Raises:
            ValueError: se il nome non è riconosciuto

        Examples:
            >>> RangeConventionFactory.create('INCLUSIVE')
            InclusiveConvention()
        """
        if isinstance(end_mode, RangeConvention):
            return end_mode

        if not isinstance(end_mode, str):
            raise ValueError(
                f"end_mode deve essere str o RangeConvention, "
                f"ricevuto: {type(end_mode).__name__}"
            )

        convention_class = cls._CONVENTION_MAP.get(end_mode.strip().lower())

        if convention_class is None:
            raise ValueError(
                f"Convenzione range non riconosciuta: '{end_mode}'. "
                f"Tipi validi: {cls.get_supported_types()}"
            )

        return convention_class()

    @classmethod
    def get_supported_types(cls) -> list:
        """Ritorna i nomi accettati da create()."""
        return list(cls._CONVENTION_MAP.keys())
