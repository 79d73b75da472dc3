"""Built-in input and output boundaries."""

from unogame.agents.console import ConsoleInput, ConsoleOutput, parse_color

__all__ = ["ConsoleInput", "ConsoleOutput", "parse_color"]
