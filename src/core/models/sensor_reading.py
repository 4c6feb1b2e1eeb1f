"""
Sensor reading model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SensorReading:
    """
    One simulated sample of the sewage channel.
    level is in centimeters, gas in raw ADC units (0-1023).
    """
    level: float
    gas: int
