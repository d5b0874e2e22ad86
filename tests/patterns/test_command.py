import pytest

from patternbook.domain.catalog import Transcript
from patternbook.domain.exceptions import ValidationError
from patternbook.patterns.behavioral.command import (
    DimCommand,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    RemoteControl,
    demo,
)


@pytest.fixture
def light():
    return Light("study")


def test_press_executes_and_records(light):
    remote = RemoteControl()
    remote.press(LightOnCommand(light))

    assert light.is_on
    assert light.level == 100
    assert remote.history == ["turn on study"]


def test_undo_reverses_last_command(light):
    remote = RemoteControl()
    remote.press(LightOnCommand(light))
    remote.press(LightOffCommand(light))

    undone = remote.undo()

    assert isinstance(undone, LightOffCommand)
    assert light.is_on
    assert remote.history == ["turn on study"]


def test_undo_with_empty_history_returns_none():
    assert RemoteControl().undo() is None


def test_dim_undo_restores_previous_state(light):
    remote = RemoteControl()
    remote.press(LightOnCommand(light))
    remote.press(DimCommand(light, 30))
    assert light.level == 30

    remote.undo()
    assert (light.is_on, light.level) == (True, 100)


def test_dim_to_zero_turns_light_off(light):
    DimCommand(light, 0).execute()
    assert not light.is_on


def test_dim_out_of_range(light):
    with pytest.raises(ValidationError):
        DimCommand(light, 120).execute()


def test_macro_undoes_in_reverse_order(light):
    calls = []

    class Recording(LightOnCommand):
        def __init__(self, name):
            super().__init__(light)
            self.name = name

        def execute(self):
            calls.append(f"do {self.name}")

        def undo(self):
            calls.append(f"undo {self.name}")

    macro = MacroCommand([Recording("a"), Recording("b")])
    macro.execute()
    macro.undo()

    assert calls == ["do a", "do b", "undo b", "undo a"]


def test_off_undo_keeps_light_off_when_it_was_off(light):
    remote = RemoteControl()
    remote.press(LightOffCommand(light))

    remote.undo()

    assert (light.is_on, light.level) == (False, 0)


def test_on_undo_restores_dimmed_level(light):
    light.dim(25)
    light.off()
    remote = RemoteControl()
    remote.press(LightOnCommand(light))
    assert (light.is_on, light.level) == (True, 25)

    remote.undo()
    assert (light.is_on, light.level) == (False, 25)


def test_failing_macro_rolls_back_and_is_not_recorded(light):
    hall = Light("hall")
    remote = RemoteControl()
    macro = MacroCommand([LightOnCommand(light), LightOnCommand(hall), DimCommand(light, 150)], "broken")

    with pytest.raises(ValidationError):
        remote.press(macro)

    assert not light.is_on
    assert not hall.is_on
    assert remote.history == []


def test_demo_output():
    out = Transcript()
    demo(out)
    assert out.lines == [
        "kitchen light on at 100%",
        "kitchen light on at 40%",
        "undo dim kitchen to 40%: kitchen light on at 100%",
        "kitchen light off; hall light off",
        "history: turn on kitchen, turn on hall, all off",
    ]
