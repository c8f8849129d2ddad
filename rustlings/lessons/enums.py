"""Messages of several shapes and the state they act on."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    x: int
    y: int


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change to a new colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """The state that messages change."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(x, y):
                self.move_position(Point(x, y))
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")