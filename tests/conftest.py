# tests/conftest.py
import pytest
import random

from segments.segment_map import SegmentMap
from segments.segment_config import SegmentMapConfig
import shared.logger as logger_module


# =============================================================================
# LOGGER: stato globale pulito per ogni test
# =============================================================================

@pytest.fixture(autouse=True)
def reset_segment_logger():
    """
    Resetta SEGMENT_LOG_CONFIG e il logger lazy prima e dopo ogni test.
    Chiude gli handler aperti per non lasciare file descriptor pendenti.
    """
    def _close_and_reset():
        if logger_module._segment_logger is not None:
            for handler in logger_module._segment_logger.handlers[:]:
                handler.close()
                logger_module._segment_logger.removeHandler(handler)
        logger_module._segment_logger = None
        logger_module._segment_logger_initialized = False
        logger_module.SEGMENT_LOG_CONFIG.update({
            'enabled': True,
            'console_enabled': True,
            'file_enabled': False,
            'log_dir': './logs',
            'log_filename': None,
            'log_mutations': False,
        })

    _close_and_reset()
    yield
    _close_and_reset()


# =============================================================================
# FIXTURES SEGMENT MAP
# =============================================================================

@pytest.fixture
def segments():
    """SegmentMap vuota, range semi-aperti."""
    return SegmentMap()


@pytest.fixture
def inclusive_segments():
    """SegmentMap vuota, range chiusi [from, to]."""
    return SegmentMap(SegmentMapConfig(end_mode='inclusive'))


@pytest.fixture
def layered_segments():
    """
    Due add sovrapposti.
    [1, 4): 10
    [4, 5): 15
    [5, 8): 5
    """
    return SegmentMap().add(1, 5, 10).add(4, 8, 5)


@pytest.fixture
def rng():
    return random.Random(1234)


# =============================================================================
# MODELLO DENSO DI RIFERIMENTO
# =============================================================================

class DenseModel:
    """
    Modello ingenuo: un valore per ogni intero in una finestra finita.
    Usato solo come oracolo nei test randomizzati.
    """

    def __init__(self, low, high, inclusive=False):
        self.low = low
        self.high = high
        self.inclusive = inclusive
        self.values = {p: 0 for p in range(low, high)}

    def _positions(self, start, end):
        stop = end + 1 if self.inclusive else end
        return range(start, stop)

    def add(self, start, end, amount):
        for p in self._positions(start, end):
            self.values[p] += amount

    def set(self, start, end, amount):
        for p in self._positions(start, end):
            self.values[p] = amount

    def breakpoints(self):
        result = {}
        previous = 0
        for p in range(self.low, self.high):
            if self.values[p] != previous:
                result[p] = self.values[p]
                previous = self.values[p]
        return result


@pytest.fixture
def dense_model_class():
    return DenseModel
