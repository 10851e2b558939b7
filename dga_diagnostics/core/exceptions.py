"""
DGA Diagnostics error types
"""

from typing import Optional


class DGAError(Exception):
    """Base class for all diagnostics errors"""


class InvalidInputError(DGAError, ValueError):
    """A gas reading is negative, not a finite number or not a known gas"""

    def __init__(self, gas: str, value, reason: Optional[str] = None):
        self.gas = gas
        self.value = value
        message = f"Invalid concentration for {gas}: {value!r} ppm"
        super().__init__(f"{message} ({reason})" if reason else message)


class UnknownZoneError(DGAError, KeyError):
    """Requested zone label has no boundary definition"""

    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(zone)

    def __str__(self):
        return f"Unknown zone: {self.zone}"
