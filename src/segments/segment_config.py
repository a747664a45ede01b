# segment_config.py
from dataclasses import dataclass, fields

from segments.range_convention import RangeConventionFactory


@dataclass(frozen=True)
class SegmentMapConfig:
    """
    Configurazione di una SegmentMap.

    Contiene solo le regole che determinano il COMPORTAMENTO
    delle operazioni (convenzione degli estremi), non lo stato.

    Attributes:
        end_mode: 'exclusive' -> [from, to), 'inclusive' -> [from, to]
    """
    end_mode: str = 'exclusive'

    def __post_init__(self):
        # Fail fast: nome sconosciuto -> ValueError
        RangeConventionFactory.create(self.end_mode)

    @classmethod
    def from_yaml(cls, yaml_data: dict, allow_none: bool = True) -> 'SegmentMapConfig':
        """
        Costruisce la config da un dict (tipicamente la sezione 'config' di un YAML).

        Chiavi sconosciute vengono ignorate.

        Raises:
            ValueError: se yaml_data non è un dict (né None)
        """
        if yaml_data is None:
            return cls()

        if not isinstance(yaml_data, dict):
            raise ValueError(
                f"Sezione config non valida: atteso dict, "
                f"ricevuto {type(yaml_data).__name__} ({yaml_data!r})"
            )

        field_names = [f.name for f in fields(cls)]

        if allow_none:
            kwargs = {name: yaml_data[name] for name in field_names if name in yaml_data}
        else:
            kwargs = {
                name: yaml_data[name]
                for name in field_names
                if name in yaml_data and yaml_data[name] is not None
            }
        return cls(**kwargs)
