"""Abstract Factory - create families of related objects without naming their classes."""
from abc import ABC, abstractmethod

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript


class Button(ABC):
    theme = ""

    def __init__(self, label: str):
        self.label = label

    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    theme = ""

    def __init__(self, label: str, checked: bool = False):
        self.label = label
        self.checked = checked

    @abstractmethod
    def render(self) -> str:
        pass


class LightButton(Button):
    theme = "light"

    def render(self) -> str:
        return f"[ {self.label} ]"


class DarkButton(Button):
    theme = "dark"

    def render(self) -> str:
        return f"[# {self.label} #]"


class LightCheckbox(Checkbox):
    theme = "light"

    def render(self) -> str:
        mark = "x" if self.checked else " "
        return f"({mark}) {self.label}"


class DarkCheckbox(Checkbox):
    theme = "dark"

    def render(self) -> str:
        mark = "#" if self.checked else "."
        return f"<{mark}> {self.label}"


class WidgetFactory(ABC):
    """Abstract factory for one family of widgets."""

    theme = ""

    @abstractmethod
    def create_button(self, label: str) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self, label: str, checked: bool = False) -> Checkbox:
        pass


class LightWidgetFactory(WidgetFactory):
    theme = "light"

    def create_button(self, label: str) -> Button:
        return LightButton(label)

    def create_checkbox(self, label: str, checked: bool = False) -> Checkbox:
        return LightCheckbox(label, checked)


class DarkWidgetFactory(WidgetFactory):
    theme = "dark"

    def create_button(self, label: str) -> Button:
        return DarkButton(label)

    def create_checkbox(self, label: str, checked: bool = False) -> Checkbox:
        return DarkCheckbox(label, checked)


def render_form(factory: WidgetFactory) -> str:
    """Client code; only sees the abstract factory and product interfaces."""
    widgets = [
        factory.create_checkbox("Subscribe", checked=True),
        factory.create_button("Submit"),
    ]
    return " ".join(widget.render() for widget in widgets)


@catalog_pattern(
    slug="abstract-factory",
    name="Abstract Factory",
    category=PatternCategory.CREATIONAL,
    intent="Provide an interface for creating families of related objects without specifying their concrete classes.",
    participants=["WidgetFactory", "Button", "Checkbox", "LightWidgetFactory", "DarkWidgetFactory"],
)
def demo(out: Transcript) -> None:
    for factory in (LightWidgetFactory(), DarkWidgetFactory()):
        out.emit(f"{factory.theme}: {render_form(factory)}")
