"""Bundled example shell used by ``python -m declcli``."""

from __future__ import annotations

import enum
from typing import Annotated

from .commands import Arg, CommandHandler, Float64, command
from .core.errors import CommandError


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class DemoShell(CommandHandler):
    @command("add", help="Add two numbers")
    def add(self, a: Annotated[int, Arg("summand 1")], b: Annotated[int, Arg("summand 2")]):
        self.console.print(f"Result: {a + b}", markup=False)

    @command("hello", help="Greets individually")
    def greet(self, name: Annotated[str, Arg("The name to greet")]):
        self.console.print(f"Hello {name}", markup=False)

    @command("hello", help="Prints out simple hello world")
    def print_hello(self):
        self.console.print("Hello World!")

    @command("paint", help="Pick a color")
    def paint(self, color: Annotated[Color, Arg("RED, GREEN or BLUE")]):
        self.console.print(f"Painting it {color.value}", markup=False)

    @command("divide", help="Divide two numbers")
    def divide(self, a: Annotated[Float64, Arg("dividend")], b: Annotated[Float64, Arg("divisor")]):
        if b == 0:
            raise CommandError("division by zero")
        self.console.print(f"Result: {a / b}", markup=False)
