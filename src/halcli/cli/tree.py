"""The command tree: nested, named sub-commands built once per process.

Every :class:`CommandNode` owns its children and knows nothing about its
siblings.  Building the tree is a two-step affair:

1. :meth:`CommandNode.register` children, bottom-up or top-down;
2. :meth:`CommandNode.wire` the root onto an ``argparse`` parser, which
   gives each child its own sub-parser, parent before child.

After parsing, :func:`parsed_path` reads the matched command names from
the namespace and :meth:`CommandNode.resolve` walks them to the node
whose action runs.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from halcli.core.protocols import Action
from halcli.exceptions import CommandTreeError, DuplicateNameError

ArgumentsHook = Callable[[argparse.ArgumentParser], None]


def path_dest(depth: int) -> str:
    """Namespace attribute holding the command name matched at *depth*."""
    return f"_hal_command_{depth}"


class CommandNode:
    """One sub-command: a name, its children and at most one action.

    Parameters
    ----------
    name:
        Sub-command name, unique among siblings.
    action:
        What runs when this node is the deepest one matched.  May be
        ``None`` only for nodes with children, whose sub-command is then
        made mandatory at parse time.
    description:
        One-line help text.
    add_arguments:
        Optional hook declaring this node's own options on its parser.
    """

    def __init__(
        self,
        name: str,
        *,
        action: Action | None = None,
        description: str = "",
        add_arguments: ArgumentsHook | None = None,
    ) -> None:
        self.name: str = name
        self.action: Action | None = action
        self.description: str = description
        self.add_arguments: ArgumentsHook | None = add_arguments
        self.children: dict[str, CommandNode] = {}
        self.parent: CommandNode | None = None
        self.parser: argparse.ArgumentParser | None = None

    def __repr__(self) -> str:
        return f"CommandNode({self.full_name!r})"

    @property
    def full_name(self) -> str:
        names: list[str] = []
        node: CommandNode | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return " ".join(reversed(names))

    @property
    def is_wired(self) -> bool:
        return self.parser is not None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def register(self, child: CommandNode) -> CommandNode:
        """Add *child* under this node and return it.

        Raises
        ------
        DuplicateNameError
            If a sibling already uses ``child.name``.  The tree is left
            unchanged.
        CommandTreeError
            If this node is already wired, or *child* already has a parent.
        """
        if self.is_wired:
            raise CommandTreeError(
                f"Cannot register {child.name!r}: {self.full_name!r} is already wired.",
            )
        if child.name in self.children:
            raise DuplicateNameError(
                f"{self.full_name!r} already has a sub-command named {child.name!r}.",
            )
        if child.parent is not None:
            raise CommandTreeError(
                f"{child.name!r} is already registered under {child.parent.full_name!r}.",
            )
        child.parent = self
        self.children[child.name] = child
        return child

    def wire(self, parser: argparse.ArgumentParser, *, depth: int = 0) -> None:
        """Attach *parser* to this node, then give every child its own sub-parser.

        Must be called on the root before any parsing; children are wired
        only after their parent's parser exists.
        """
        if self.is_wired:
            raise CommandTreeError(f"{self.full_name!r} is already wired.")
        if self.action is None and not self.children:
            raise CommandTreeError(f"{self.full_name!r} has neither an action nor children.")

        self.parser = parser
        if self.add_arguments is not None:
            self.add_arguments(parser)
        if not self.children:
            return

        subparsers = parser.add_subparsers(
            dest=path_dest(depth),
            metavar="COMMAND",
            title="commands",
        )
        # Without a fallback action argparse must reject a missing sub-command.
        subparsers.required = self.action is None
        for child in self.children.values():
            child_parser = subparsers.add_parser(
                child.name,
                help=child.description,
                description=child.description,
            )
            child.wire(child_parser, depth=depth + 1)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, path: Sequence[str]) -> CommandNode:
        """Return the deepest node along *path*; the node itself when empty."""
        node = self
        for name in path:
            try:
                node = node.children[name]
            except KeyError:
                raise CommandTreeError(
                    f"{node.full_name!r} has no sub-command {name!r}.",
                ) from None
        return node


def parsed_path(args: argparse.Namespace) -> list[str]:
    """Return the command names argparse matched, shortest to longest."""
    path: list[str] = []
    depth = 0
    while True:
        name = getattr(args, path_dest(depth), None)
        if name is None:
            return path
        path.append(name)
        depth += 1
