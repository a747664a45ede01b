# errors.py
"""
Errori sollevati dal package segments.
"""


class InvalidRange(ValueError):
    """
    Sollevato quando un range viene rifiutato, prima di qualsiasi mutazione.

    Un range non è valido se 'from' > 'to' o se uno dei due bound
    non è un intero.

    Attributes:
        start: bound 'from' così come ricevuto
        end: bound 'to' così come ricevuto
        reason: breve descrizione della regola violata
    """

    def __init__(self, start, end, reason: str = None):
        self.start = start
        self.end = end
        self.reason = reason

        message = (
            f"Invalid range [{start!r}, {end!r}]: "
            "'from' must be <= 'to' and both must be integers"
        )
        if reason:
            message += f" ({reason})"
        super().__init__(message)
