import pytest

from patternbook.domain.catalog import Transcript
from patternbook.patterns.structural.adapter import (
    CelsiusSensor,
    FahrenheitProbe,
    FahrenheitProbeAdapter,
    TemperatureSensor,
    demo,
    describe_reading,
)


@pytest.mark.parametrize(
    "fahrenheit, celsius",
    [(32.0, 0.0), (212.0, 100.0), (-40.0, -40.0), (98.6, 37.0)],
)
def test_adapter_converts_to_celsius(fahrenheit, celsius):
    adapter = FahrenheitProbeAdapter(FahrenheitProbe("P1", fahrenheit))
    assert adapter.read_celsius() == pytest.approx(celsius)


def test_adapter_satisfies_target_interface():
    adapter = FahrenheitProbeAdapter(FahrenheitProbe("P1", 50.0))
    assert isinstance(adapter, TemperatureSensor)
    assert describe_reading(adapter) == "probe P1: 10.0 C"


def test_client_works_with_native_sensor():
    assert describe_reading(CelsiusSensor("attic", 30)) == "attic: 30.0 C"


def test_demo_output():
    out = Transcript()
    demo(out)
    assert out.lines == ["greenhouse: 21.5 C", "probe FP-7: 37.0 C"]
