"""Adapter - convert the interface of a class into the one clients expect."""
from abc import ABC, abstractmethod

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript


class TemperatureSensor(ABC):
    """Target interface."""

    name = "sensor"

    @abstractmethod
    def read_celsius(self) -> float:
        pass


class CelsiusSensor(TemperatureSensor):
    def __init__(self, name: str, celsius: float):
        self.name = name
        self._celsius = celsius

    def read_celsius(self) -> float:
        return self._celsius


class FahrenheitProbe:
    """Adaptee with an incompatible, legacy interface."""

    def __init__(self, serial: str, fahrenheit: float):
        self.serial = serial
        self._fahrenheit = fahrenheit

    def read_fahrenheit(self) -> float:
        return self._fahrenheit


class FahrenheitProbeAdapter(TemperatureSensor):
    """Makes a ``FahrenheitProbe`` usable wherever a ``TemperatureSensor`` is."""

    def __init__(self, probe: FahrenheitProbe):
        self._probe = probe
        self.name = f"probe {probe.serial}"

    def read_celsius(self) -> float:
        return round((self._probe.read_fahrenheit() - 32) * 5 / 9, 1)


def describe_reading(sensor: TemperatureSensor) -> str:
    return f"{sensor.name}: {sensor.read_celsius():.1f} C"


@catalog_pattern(
    slug="adapter",
    name="Adapter",
    category=PatternCategory.STRUCTURAL,
    intent="Convert the interface of a class into another interface clients expect.",
    participants=["TemperatureSensor", "FahrenheitProbe", "FahrenheitProbeAdapter"],
)
def demo(out: Transcript) -> None:
    sensors = [
        CelsiusSensor("greenhouse", 21.5),
        FahrenheitProbeAdapter(FahrenheitProbe("FP-7", 98.6)),
    ]
    for sensor in sensors:
        out.emit(describe_reading(sensor))
