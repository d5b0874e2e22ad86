"""Observer - notify dependents automatically when a subject changes state."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "Subject") -> None:
        """Called when the subject has changed."""
        ...


class Subject:
    """
    Keeps a list of observers and notifies them.

    Each attached observer receives exactly one ``update`` per ``notify``, in
    attach order. Delivery iterates over a snapshot, so observers detached
    mid-notification still receive the current one. A failing observer is
    logged and delivery continues with the rest.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        if observer in self._observers:
            return
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer not in self._observers:
            logger.debug("Detach ignored, observer not attached", observer=type(observer).__name__)
            return
        self._observers.remove(observer)

    def notify(self) -> int:
        """Notify every attached observer; returns how many were updated successfully."""
        delivered = 0
        for observer in tuple(self._observers):
            try:
                observer.update(self)
                delivered += 1
            except Exception as e:
                logger.error(
                    "Observer update failed",
                    observer=type(observer).__name__,
                    error=str(e),
                )
                # Continue with other observers
        return delivered


class WeatherStation(Subject):
    def __init__(self, temperature: Optional[float] = None) -> None:
        super().__init__()
        self._temperature = temperature

    @property
    def temperature(self) -> Optional[float]:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        if value == self._temperature:
            return
        self._temperature = value
        self.notify()


class TemperatureDisplay(Observer):
    def __init__(self, name: str, out: Optional[Transcript] = None) -> None:
        self.name = name
        self.readings: List[float] = []
        self._out = out

    def update(self, subject: Subject) -> None:
        reading = subject.temperature
        self.readings.append(reading)
        if self._out is not None:
            self._out.emit(f"{self.name} shows {reading} C")


@catalog_pattern(
    slug="observer",
    name="Observer",
    category=PatternCategory.BEHAVIORAL,
    intent="Define a one-to-many dependency so that when one object changes state, its dependents are notified.",
    participants=["Subject", "Observer", "WeatherStation", "TemperatureDisplay"],
)
def demo(out: Transcript) -> None:
    station = WeatherStation()
    lobby = TemperatureDisplay("lobby", out)
    station.attach(lobby)

    station.temperature = 18.5
    out.emit(f"lobby updates received: {len(lobby.readings)}")

    station.detach(lobby)
    station.temperature = 19.0
    out.emit(f"lobby updates after detach: {len(lobby.readings)}")
