# =============================================================================
# logger.py - Gestione logging per le operazioni sulle SegmentMap
# =============================================================================
import logging
from datetime import datetime
import os

# =============================================================================
# CONFIGURAZIONE
# =============================================================================
SEGMENT_LOG_CONFIG = {
    'enabled': True,                    # Master switch: False disabilita tutto
    'console_enabled': True,            # Stampa su terminale (solo WARNING+)
    'file_enabled': False,              # Scrive su file
    'log_dir': './logs',                # Directory per i file di log
    'log_filename': None,               # None = auto-genera con timestamp
    'log_mutations': False,             # Logga ogni add/set (livello INFO)
}

LOGGER_NAME = 'intensity_segments'

_segment_logger = None
_segment_logger_initialized = False


# =============================================================================
# FUNZIONI PUBBLICHE
# =============================================================================

def configure_segment_logger(
    enabled=True,
    console_enabled=True,
    file_enabled=False,
    log_dir='./logs',
    log_filename=None,
    log_mutations=False
):
    """
    Configura il logger delle SegmentMap.
    Chiamare PRIMA delle operazioni da tracciare.

    Args:
        enabled: Master switch - se False, nessun logging
        console_enabled: Se True, stampa warning su terminale
        file_enabled: Se True, scrive su file
        log_dir: Directory dove salvare i file di log
        log_filename: Nome del file (None = segments_{timestamp}.log)
        log_mutations: Se True, ogni add/set viene loggato a livello INFO
    """
    global _segment_logger, _segment_logger_initialized

    SEGMENT_LOG_CONFIG['enabled'] = enabled
    SEGMENT_LOG_CONFIG['console_enabled'] = console_enabled
    SEGMENT_LOG_CONFIG['file_enabled'] = file_enabled
    SEGMENT_LOG_CONFIG['log_dir'] = log_dir
    SEGMENT_LOG_CONFIG['log_filename'] = log_filename
    SEGMENT_LOG_CONFIG['log_mutations'] = log_mutations

    # Reset logger per ri-inizializzazione
    _close_handlers()
    _segment_logger = None
    _segment_logger_initialized = False


def get_segment_logger():
    """
    Ottiene il logger (lazy initialization).
    Rispetta la configurazione in SEGMENT_LOG_CONFIG.

    Returns:
        logging.Logger o None se disabilitato
    """
    global _segment_logger, _segment_logger_initialized

    # Se già inizializzato, ritorna (anche se None)
    if _segment_logger_initialized:
        return _segment_logger

    _segment_logger_initialized = True

    if not SEGMENT_LOG_CONFIG['enabled']:
        _segment_logger = None
        return None

    if not SEGMENT_LOG_CONFIG['console_enabled'] and not SEGMENT_LOG_CONFIG['file_enabled']:
        _segment_logger = None
        return None

    _segment_logger = logging.getLogger(LOGGER_NAME)
    _segment_logger.setLevel(logging.INFO)
    _segment_logger.handlers = []

    # === FILE HANDLER ===
    if SEGMENT_LOG_CONFIG['file_enabled']:
        log_dir = SEGMENT_LOG_CONFIG['log_dir']
        os.makedirs(log_dir, exist_ok=True)

        log_filename = SEGMENT_LOG_CONFIG.get('log_filename')
        if not log_filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_filename = f'segments_{timestamp}.log'

        log_path = os.path.join(log_dir, log_filename)

        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        ))
        _segment_logger.addHandler(file_handler)

    # === CONSOLE HANDLER ===
    if SEGMENT_LOG_CONFIG['console_enabled']:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('SEGMENTS: %(message)s'))
        _segment_logger.addHandler(console_handler)

    return _segment_logger


def get_segment_log_path():
    """
    Ritorna il percorso del file di log corrente (se esiste).

    Returns:
        str o None
    """
    if _segment_logger is None:
        return None

    for handler in _segment_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None


def log_invalid_range(operation, start, end, reason):
    """
    Logga un range rifiutato (prima che venga sollevato InvalidRange).

    Args:
        operation: 'add' o 'set'
        start: bound 'from' ricevuto
        end: bound 'to' ricevuto
        reason: regola violata
    """
    logger = get_segment_logger()

    if logger is None:
        return

    logger.warning(
        f"[{operation:<3}] invalid range from={start!r} to={end!r} | {reason}"
    )


def log_mutation(operation, start, end, amount, breakpoint_count):
    """
    Logga una mutazione completata.
    Attivo solo con log_mutations=True.

    Args:
        operation: 'add' o 'set'
        start: bound 'from'
        end: bound 'to'
        amount: valore applicato
        breakpoint_count: numero di breakpoint dopo la canonicalizzazione
    """
    if not SEGMENT_LOG_CONFIG['log_mutations']:
        return

    logger = get_segment_logger()

    if logger is None:
        return

    logger.info(
        f"[{operation:<3}] from={start:>8} to={end:>8} | "
        f"amount={amount:>+8} | breakpoints={breakpoint_count}"
    )


# =============================================================================
# HELPER INTERNI
# =============================================================================

def _close_handlers():
    if _segment_logger is None:
        return
    for handler in _segment_logger.handlers[:]:
        handler.close()
        _segment_logger.removeHandler(handler)
