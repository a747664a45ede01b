"""
operation_parser.py

Ponte tra dati grezzi (dict/liste, tipicamente da YAML) e le operazioni
su SegmentMap.

Responsabilità:
1. Conversione: trasforma dict o liste in oggetti Operation.
2. Validazione statica: op sconosciute, range e amount non validi
   vengono rifiutati PRIMA di toccare la mappa (Fail Fast).
3. Applicazione atomica: un batch valido viene applicato in ordine,
   un batch non valido lascia la mappa invariata.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

import yaml

from segments.segment_config import SegmentMapConfig
from segments.segment_map import SegmentMap, validate_range


SUPPORTED_OPERATIONS = ('add', 'set')


@dataclass(frozen=True)
class Operation:
    """
    Singola operazione add/set già validata.

    Attributes:
        op: 'add' o 'set'
        start: bound 'from'
        end: bound 'to'
        amount: valore da sommare / scrivere
    """
    op: str
    start: int
    end: int
    amount: int

    def __post_init__(self):
        if self.op not in SUPPORTED_OPERATIONS:
            raise ValueError(
                f"Operazione non riconosciuta: '{self.op}'. "
                f"Operazioni valide: {list(SUPPORTED_OPERATIONS)}"
            )
        start, end, amount = validate_range(self.op, self.start, self.end, self.amount)
        # frozen: normalizza i tipi (es. numpy.int64 -> int)
        object.__setattr__(self, 'start', start)
        object.__setattr__(self, 'end', end)
        object.__setattr__(self, 'amount', amount)

    def apply(self, segment_map: SegmentMap) -> SegmentMap:
        return getattr(segment_map, self.op)(self.start, self.end, self.amount)


RawOperation = Union[Operation, dict, list, tuple]


class OperationParser:
    """
    Factory di Operation a partire da dati grezzi.

    Formati accettati per ogni elemento:
    - {'op': 'add', 'from': 1, 'to': 5, 'amount': 10}
      ('start'/'end' sono alias di 'from'/'to')
    - ['add', 1, 5, 10]
    - Operation già costruita (passa invariata)
    """

    @classmethod
    def parse(cls, raw_operations: Iterable[RawOperation]) -> List[Operation]:
        """
        Converte una lista di operazioni grezze.

        Raises:
            ValueError: formato o nome operazione non validi
            InvalidRange: range non valido
        """
        if raw_operations is None:
            return []
        if isinstance(raw_operations, (dict, str)):
            raise ValueError(
                f"Atteso una lista di operazioni, ricevuto: {type(raw_operations).__name__}"
            )
        return [cls.parse_one(item) for item in raw_operations]

    @classmethod
    def parse_one(cls, raw: RawOperation) -> Operation:
        if isinstance(raw, Operation):
            return raw

        if isinstance(raw, dict):
            return cls._from_dict(raw)

        if isinstance(raw, (list, tuple)):
            if len(raw) != 4:
                raise ValueError(
                    f"Formato operazione non valido: {raw!r}. "
                    "Atteso [op, from, to, amount]."
                )
            op, start, end, amount = raw
            return Operation(cls._normalize_op(op), start, end, amount)

        raise ValueError(f"Formato operazione non valido: {raw!r}")

    @classmethod
    def parse_yaml(cls, text: str) -> Tuple[Optional[SegmentMapConfig], List[Operation]]:
        """
        Parsa un documento YAML in memoria.

        Il documento può essere:
        - una lista di operazioni
        - un dict con 'operations' e, opzionale, 'config'

        Returns:
            (config o None, lista di Operation)
        """
        data = yaml.safe_load(text)

        if data is None:
            return None, []

        if isinstance(data, list):
            return None, cls.parse(data)

        if isinstance(data, dict):
            config = None
            if 'config' in data:
                config = SegmentMapConfig.from_yaml(data['config'])
            return config, cls.parse(data.get('operations') or [])

        raise ValueError(f"Documento YAML non valido: atteso lista o dict, ricevuto {type(data).__name__}")

    # =========================================================================
    # INTERNAL HELPER METHODS
    # =========================================================================

    @classmethod
    def _from_dict(cls, raw: dict) -> Operation:
        if 'op' not in raw:
            raise ValueError(f"Operazione senza chiave 'op': {raw!r}")

        start = cls._pick(raw, 'from', 'start')
        end = cls._pick(raw, 'to', 'end')
        if 'amount' not in raw:
            raise ValueError(f"Operazione senza chiave 'amount': {raw!r}")

        return Operation(cls._normalize_op(raw['op']), start, end, raw['amount'])

    @staticmethod
    def _pick(raw: dict, key: str, alias: str) -> Any:
        if key in raw:
            return raw[key]
        if alias in raw:
            return raw[alias]
        raise ValueError(f"Operazione senza chiave '{key}': {raw!r}")

    @staticmethod
    def _normalize_op(op: Any) -> str:
        if not isinstance(op, str):
            raise ValueError(f"Nome operazione non valido: {op!r}")
        return op.strip().lower()


def apply_operations(segment_map: SegmentMap,
                     raw_operations: Iterable[RawOperation]) -> SegmentMap:
    """
    Applica un batch di operazioni in ordine.

    Tutto il batch viene validato prima della prima mutazione:
    se un elemento non è valido la mappa resta invariata.
    """
    operations = OperationParser.parse(raw_operations)
    for operation in operations:
        operation.apply(segment_map)
    return segment_map


def build_from_yaml(text: str) -> SegmentMap:
    """Crea una SegmentMap (con eventuale config) e applica le operazioni del documento."""
    config, operations = OperationParser.parse_yaml(text)
    return apply_operations(SegmentMap(config), operations)
