"""Tests for CommandHandler: built-in help/quit, overloads, completions."""

import enum
import io
from typing import Annotated

import pytest

from declcli.commands import (
    Arg,
    CommandHandler,
    Float32,
    OutcomeKind,
    RegistryBuilder,
    command,
    render_help,
)
from declcli.core.errors import CommandError
from declcli.core.utils import make_console


class Color(enum.Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Example(CommandHandler):
    @command("add", help="Add two numbers")
    def add(self, a: Annotated[int, Arg("summand 1")], b: Annotated[int, Arg("summand 2")]):
        self.console.print(f"Result: {a + b}")

    @command("add", help="Add three numbers")
    def add3(self, a: int, b: int, c: int):
        self.console.print(f"Result: {a + b + c}")

    @command("hello", help="Greets individually")
    def greet(self, name: Annotated[str, Arg("The name to greet")]):
        self.console.print(f"Hello {name}")

    @command("hello", help="Prints out simple hello world")
    def print_hello(self):
        self.console.print("Hello World!")

    @command("paint", help="Pick a color")
    def paint(self, color: Color, opacity: Float32):
        self.console.print(f"{color.name} {opacity}")

    @command("explode", help="Always fails")
    def explode(self):
        raise CommandError("nothing to explode")


@pytest.fixture
def shell():
    buf = io.StringIO()
    return Example(console=make_console(buf, force_terminal=False, width=120)), buf


class TestBuiltins:
    def test_quit_requests_shutdown(self, shell):
        h, buf = shell
        outcome = h.handle("quit")
        assert outcome.kind is OutcomeKind.SHUTDOWN_REQUESTED
        assert buf.getvalue() == ""

    def test_quit_case_insensitive(self, shell):
        h, _ = shell
        assert h.handle("QUIT").should_exit

    def test_quit_with_args_is_unknown(self, shell):
        h, _ = shell
        assert h.handle("quit now").kind is OutcomeKind.UNKNOWN_COMMAND

    def test_help_lists_everything(self, shell):
        h, buf = shell
        assert h.handle("help").kind is OutcomeKind.SUCCESS
        out = buf.getvalue()
        assert out.startswith("List of possible commands:\n")
        assert "            add 2 - Add two numbers\n" in out
        assert "            add 3 - Add three numbers\n" in out
        assert "           quit 0 - quits the cli\n" in out
        assert out.endswith("Choose wisely. Use help <command> if unsure!\n")

    def test_help_lists_quit_once(self, shell):
        h, buf = shell
        h.handle("help")
        assert buf.getvalue().count(" quit 0 ") == 1

    def test_help_lists_in_registry_order(self, shell):
        h, buf = shell
        h.handle("help")
        rows = buf.getvalue().splitlines()[1:-1]
        names = [r.split()[0] for r in rows]
        assert names == ["add", "add", "hello", "hello", "paint", "explode", "help", "help", "quit"]

    def test_help_detail_overloads_divided(self, shell):
        h, buf = shell
        h.handle("help add")
        assert buf.getvalue() == (
            "Command add (2 parameters): Add two numbers\n"
            "@param int32: summand 1\n"
            "@param int32: summand 2\n"
            "----\n"
            "Command add (3 parameters): Add three numbers\n"
            "@param int32: no help given\n"
            "@param int32: no help given\n"
            "@param int32: no help given\n"
        )

    def test_help_detail_type_labels(self, shell):
        h, buf = shell
        h.handle("help paint")
        out = buf.getvalue()
        assert "@param Color: no help given" in out
        assert "@param float32: no help given" in out

    def test_help_unknown(self, shell):
        h, buf = shell
        h.handle("help bogus")
        assert buf.getvalue() == "Command bogus not found\n"

    def test_help_quoted_name(self, shell):
        h, buf = shell
        h.handle('help "hello"')
        assert "Greets individually" in buf.getvalue()

    def test_help_is_idempotent(self, shell):
        h, buf = shell
        h.handle("help")
        first = buf.getvalue()
        h.handle("help")
        assert buf.getvalue() == first * 2


class TestDispatch:
    def test_add(self, shell):
        h, buf = shell
        assert h.handle("add 3 4").kind is OutcomeKind.SUCCESS
        assert buf.getvalue() == "Result: 7\n"

    def test_overload_by_arity(self, shell):
        h, buf = shell
        h.handle("add 1 2 3")
        assert buf.getvalue() == "Result: 6\n"

    def test_arity_mismatch(self, shell):
        h, buf = shell
        assert h.handle("add 3").kind is OutcomeKind.UNKNOWN_COMMAND
        assert buf.getvalue() == "Unknown command or wrong parameter count\n"

    def test_quoted_argument(self, shell):
        h, buf = shell
        h.handle('hello "John Doe"')
        assert buf.getvalue() == "Hello John Doe\n"

    def test_zero_arg_overload(self, shell):
        h, buf = shell
        h.handle("hello")
        assert buf.getvalue() == "Hello World!\n"

    def test_enum_wrong_case(self, shell):
        h, buf = shell
        assert h.handle("paint red 1").kind is OutcomeKind.ARGUMENT_CONVERSION_ERROR
        assert buf.getvalue() == "invalid numeric parameter given\n"

    def test_reported_error(self, shell):
        h, buf = shell
        assert h.handle("explode").kind is OutcomeKind.USER_REPORTED_ERROR
        assert buf.getvalue() == "failed to execute command: nothing to explode\n"

    def test_execute_direct(self, shell):
        h, buf = shell
        assert h.execute("add", ["2", "2"]).kind is OutcomeKind.SUCCESS
        assert buf.getvalue() == "Result: 4\n"


class TestCompletions:
    def test_names_plus_builtins(self, shell):
        h, _ = shell
        assert h.completions == frozenset({"add", "hello", "paint", "explode", "help", "quit"})

    def test_snapshot_not_recomputed(self, shell):
        h, _ = shell
        assert h.completions is h.completions

    def test_describe(self, shell):
        h, _ = shell
        assert h.describe("paint") == "Pick a color"
        assert h.describe("nope") == ""


class TestExternalSource:
    def test_builder_source(self):
        buf = io.StringIO()
        console = make_console(buf, force_terminal=False)
        builder = RegistryBuilder().add(
            "ping", lambda: console.print("pong"), help="Reply", params=[]
        )
        h = CommandHandler(builder, console=console)
        h.handle("ping")
        assert buf.getvalue() == "pong\n"
        assert h.completions == frozenset({"ping", "help", "quit"})

    def test_user_quit_shadows_builtin(self):
        class Stubborn(CommandHandler):
            @command("quit", help="refuses")
            def no_quit(self):
                self.console.print("not leaving")

        buf = io.StringIO()
        h = Stubborn(console=make_console(buf, force_terminal=False))
        assert h.handle("quit").kind is OutcomeKind.SUCCESS
        assert buf.getvalue() == "not leaving\n"

    def test_help_text_matches_render(self, shell):
        h, _ = shell
        assert h.help_text() == render_help(h.registry)
        assert h.help_text("add") == render_help(h.registry, "add")
