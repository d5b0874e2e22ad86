"""Command - encapsulate a request as an object, with undo."""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript
from patternbook.domain.exceptions import ValidationError


class Light:
    """Receiver."""

    def __init__(self, room: str):
        self.room = room
        self.is_on = False
        self.level = 0

    def on(self) -> None:
        self.is_on = True
        if self.level == 0:
            self.level = 100

    def off(self) -> None:
        self.is_on = False

    def dim(self, level: int) -> None:
        if not 0 <= level <= 100:
            raise ValidationError(f"Light level must be 0-100, got {level}", {"level": level})
        self.level = level
        self.is_on = level > 0

    def __str__(self) -> str:
        state = f"on at {self.level}%" if self.is_on else "off"
        return f"{self.room} light {state}"


class Command(ABC):
    description = ""

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class LightCommand(Command):
    """Snapshots the receiver's state on execute so undo can restore it exactly."""

    def __init__(self, light: Light, description: str):
        self.light = light
        self.description = description
        self._previous: Optional[Tuple[bool, int]] = None

    def execute(self) -> None:
        self._previous = (self.light.is_on, self.light.level)
        self.apply()

    @abstractmethod
    def apply(self) -> None:
        pass

    def undo(self) -> None:
        if self._previous is None:
            return
        self.light.is_on, self.light.level = self._previous


class LightOnCommand(LightCommand):
    def __init__(self, light: Light):
        super().__init__(light, f"turn on {light.room}")

    def apply(self) -> None:
        self.light.on()


class LightOffCommand(LightCommand):
    def __init__(self, light: Light):
        super().__init__(light, f"turn off {light.room}")

    def apply(self) -> None:
        self.light.off()


class DimCommand(LightCommand):
    def __init__(self, light: Light, level: int):
        super().__init__(light, f"dim {light.room} to {level}%")
        self.level = level

    def apply(self) -> None:
        self.light.dim(self.level)


class MacroCommand(Command):
    """Executes commands in order and undoes them in reverse order."""

    def __init__(self, commands: Sequence[Command], description: str = "macro"):
        self.commands = list(commands)
        self.description = description

    def execute(self) -> None:
        """Run every command; if one raises, roll back the ones already run."""
        done: List[Command] = []
        try:
            for command in self.commands:
                command.execute()
                done.append(command)
        except Exception:
            for command in reversed(done):
                command.undo()
            raise

    def undo(self) -> None:
        for command in reversed(self.commands):
            command.undo()


class RemoteControl:
    """Invoker; runs commands and keeps a history for undo."""

    def __init__(self):
        self._history: List[Command] = []

    def press(self, command: Command) -> None:
        command.execute()
        self._history.append(command)

    def undo(self) -> Optional[Command]:
        if not self._history:
            return None
        command = self._history.pop()
        command.undo()
        return command

    @property
    def history(self) -> List[str]:
        return [command.description for command in self._history]


@catalog_pattern(
    slug="command",
    name="Command",
    category=PatternCategory.BEHAVIORAL,
    intent="Encapsulate a request as an object, letting you parameterize, queue and undo operations.",
    participants=["Command", "Light", "LightOnCommand", "DimCommand", "MacroCommand", "RemoteControl"],
)
def demo(out: Transcript) -> None:
    kitchen, hall = Light("kitchen"), Light("hall")
    remote = RemoteControl()

    remote.press(LightOnCommand(kitchen))
    out.emit(kitchen)
    remote.press(DimCommand(kitchen, 40))
    out.emit(kitchen)

    undone = remote.undo()
    out.emit(f"undo {undone.description}: {kitchen}")

    remote.press(LightOnCommand(hall))
    remote.press(MacroCommand([LightOffCommand(kitchen), LightOffCommand(hall)], "all off"))
    out.emit(f"{kitchen}; {hall}")
    out.emit(f"history: {', '.join(remote.history)}")
