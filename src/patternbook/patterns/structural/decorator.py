"""Decorator - attach responsibilities to an object dynamically."""
from abc import ABC, abstractmethod
from functools import wraps
from typing import Callable

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript


class TextComponent(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class PlainText(TextComponent):
    def __init__(self, text: str):
        self.text = text

    def render(self) -> str:
        return self.text


class TextDecorator(TextComponent):
    """Wraps a component and delegates to it."""

    def __init__(self, wrapped: TextComponent):
        self.wrapped = wrapped

    def render(self) -> str:
        return self.wrapped.render()


class BoldDecorator(TextDecorator):
    def render(self) -> str:
        return f"**{super().render()}**"


class ItalicDecorator(TextDecorator):
    def render(self) -> str:
        return f"_{super().render()}_"


class UpperCaseDecorator(TextDecorator):
    def render(self) -> str:
        return super().render().upper()


def traced(out: Transcript) -> Callable:
    """
    Function decorator that records each call of the wrapped function.

    This is the language-level counterpart of the class-based decorators above:
    the wrapper adds behaviour around the call and keeps the wrapped function's
    name and docstring.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            out.emit(f"-> {func.__name__}{args}")
            result = func(*args, **kwargs)
            out.emit(f"<- {func.__name__} = {result!r}")
            return result

        return wrapper

    return decorator


@catalog_pattern(
    slug="decorator",
    name="Decorator",
    category=PatternCategory.STRUCTURAL,
    intent="Attach additional responsibilities to an object dynamically.",
    participants=["TextComponent", "PlainText", "TextDecorator", "BoldDecorator", "ItalicDecorator"],
)
def demo(out: Transcript) -> None:
    text = PlainText("hello")
    out.emit(text.render())
    out.emit(BoldDecorator(text).render())
    out.emit(ItalicDecorator(BoldDecorator(text)).render())
    out.emit(BoldDecorator(UpperCaseDecorator(ItalicDecorator(text))).render())

    @traced(out)
    def add(a: int, b: int) -> int:
        return a + b

    add(2, 3)
