# =============================================================================
# SEGMENT VISUALIZER - Grafico a gradini di una SegmentMap
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

_INT64_INFO = np.iinfo(np.int64)


def to_arrays(segment_map):
    """
    Converte i breakpoint in due array numpy paralleli.

    Le SegmentMap accettano interi Python arbitrari: se una posizione o
    un valore esce dal range int64 gli array diventano dtype=object
    (int Python esatti) invece di andare in overflow.

    Returns:
        (positions, values): np.ndarray int64 (o object), stessa lunghezza
    """
    pairs = list(segment_map.render())
    if not pairs:
        empty = np.empty(0, dtype=np.int64)
        return empty, empty.copy()

    data = np.array(pairs, dtype=_dtype_for(pairs))
    return data[:, 0], data[:, 1]


def _dtype_for(pairs):
    for position, value in pairs:
        for number in (position, value):
            if not _INT64_INFO.min <= number <= _INT64_INFO.max:
                return object
    return np.int64


class SegmentVisualizer:
    """
    Disegna la step function di una SegmentMap su un Axes matplotlib.

    - Asse X: posizione intera
    - Asse Y: intensità
    - Ogni breakpoint apre un gradino che dura fino al successivo
    - Prima del primo e dopo l'ultimo breakpoint viene mostrato un margine
    """

    def __init__(self, config=None):
        """
        Args:
            config: dict di configurazione (opzionale), merge sui default
        """
        default_config = {
            'figsize': (10, 3),
            'line_color': 'steelblue',
            'line_width': 1.5,
            'fill_alpha': 0.2,        # 0 disabilita il riempimento
            'zero_line_color': 'grey',
            'margin_ratio': 0.05,     # margine laterale, frazione dello span
            'min_margin': 1,          # margine minimo in posizioni
            'label_fontsize': 8,
            'title_fontsize': 12,
        }
        if config:
            default_config.update(config)
        self.config = default_config

    def plot(self, segment_map, ax=None, title=None):
        """
        Disegna la funzione.

        Args:
            segment_map: oggetto con render()
            ax: Axes esistente; None crea una nuova figura
            title: titolo opzionale

        Returns:
            matplotlib.axes.Axes
        """
        if ax is None:
            _, ax = plt.subplots(figsize=self.config['figsize'])

        xs, ys = self.step_coordinates(segment_map)
        # matplotlib disegna in float: gli int oltre int64 arrivano come object
        xs = xs.astype(float)
        ys = ys.astype(float)

        ax.step(
            xs, ys,
            where='post',
            color=self.config['line_color'],
            linewidth=self.config['line_width'],
        )
        if self.config['fill_alpha'] > 0:
            ax.fill_between(
                xs, ys, 0,
                step='post',
                color=self.config['line_color'],
                alpha=self.config['fill_alpha'],
            )
        ax.axhline(0, color=self.config['zero_line_color'], linewidth=0.5)

        ax.set_xlabel('position', fontsize=self.config['label_fontsize'])
        ax.set_ylabel('intensity', fontsize=self.config['label_fontsize'])
        if title:
            ax.set_title(title, fontsize=self.config['title_fontsize'])

        return ax

    def step_coordinates(self, segment_map):
        """
        Coordinate per ax.step(where='post') con margini ai lati.

        Returns:
            (xs, ys) np.ndarray: il primo punto vale 0 (valore implicito
            prima del primo breakpoint), l'ultimo ripete l'ultimo valore.
        """
        pairs = list(segment_map.render())

        if not pairs:
            margin = self.config['min_margin']
            return np.array([-margin, margin], dtype=np.int64), np.zeros(2, dtype=np.int64)

        positions = [position for position, _ in pairs]
        values = [value for _, value in pairs]

        margin = self._margin(positions)
        xs = [positions[0] - margin] + positions + [positions[-1] + margin]
        ys = [0] + values + [values[-1]]

        # I margini possono uscire da int64 anche quando i breakpoint no
        dtype = _dtype_for(zip(xs, ys))
        return np.array(xs, dtype=dtype), np.array(ys, dtype=dtype)

    def _margin(self, positions):
        span = int(positions[-1] - positions[0])
        return max(self.config['min_margin'], int(np.ceil(span * self.config['margin_ratio'])))
