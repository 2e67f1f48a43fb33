"""
Builtin registry for the tinysh command loop.

Builtins are registered with a name, handler function, and metadata.
Lookup is exact and case-sensitive: "CD" is not "cd".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

# Handler signature: (tokens) -> continuation signal
BuiltinHandler = Callable[[list[str]], int]


@dataclass(frozen=True)
class BuiltinEntry:
    """Entry for a registered builtin."""

    name: str
    handler: BuiltinHandler
    description: str
    usage: str | None = None

    def execute(self, tokens: list[str]) -> int:
        """Run the builtin with the full token list (tokens[0] is the name)."""
        return self.handler(tokens)


class BuiltinRegistry:
    """Registry mapping command names to in-process builtins."""

    def __init__(self):
        self._builtins: dict[str, BuiltinEntry] = {}

    def register(
        self,
        name: str,
        description: str,
        usage: str | None = None,
    ) -> Callable:
        """Decorator to register a builtin.

        Registering a name twice replaces the earlier entry, which lets
        user builtins override package ones.

        Args:
            name: Command name as typed by the operator (e.g., "cd")
            description: Short description for help
            usage: Usage string (e.g., "cd <dir>")

        Returns:
            Decorator function

        Example:
            @builtin_registry.register("hello", "Say hello")
            def cmd_hello(tokens):
                print("Hello!")
                return CONTINUE
        """
        if not name or name != name.strip():
            raise ValueError(f"Invalid builtin name: {name!r}")

        def decorator(func: BuiltinHandler) -> BuiltinHandler:
            self._builtins[name] = BuiltinEntry(
                name=name,
                handler=func,
                description=description,
                usage=usage or name,
            )
            return func
        return decorator

    def get(self, name: str) -> BuiltinEntry | None:
        """Get a builtin by exact name."""
        return self._builtins.get(name)

    @property
    def count(self) -> int:
        """Number of registered builtins."""
        return len(self._builtins)

    def names(self) -> list[str]:
        """Builtin names in registration order."""
        return list(self._builtins)

    def all_builtins(self) -> list[BuiltinEntry]:
        """All entries in registration order."""
        return list(self._builtins.values())

    def get_completions(self) -> dict[str, str]:
        """Get builtin names and descriptions for completion."""
        return {entry.name: entry.description for entry in self._builtins.values()}

    def __len__(self) -> int:
        return len(self._builtins)

    def __contains__(self, name: object) -> bool:
        return name in self._builtins

    def __iter__(self) -> Iterator[BuiltinEntry]:
        return iter(self.all_builtins())


# Global builtin registry
builtin_registry = BuiltinRegistry()
