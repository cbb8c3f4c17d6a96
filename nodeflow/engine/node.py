"""
Node Definition for the nodeflow engine.

A node is a unit of work with three overridable hooks:

    prepare(shared) -> prep_result
    execute(prep_result) -> exec_result
    post_process(shared, prep_result, exec_result) -> action label

The action label returned by post_process selects the outgoing edge a Flow
follows next. Hooks may be written as ``async def`` or plain ``def``.
"""

from typing import Any, Dict, Optional
import inspect
import logging


logger = logging.getLogger(__name__)


# Label used when post_process returns no string
DEFAULT_ACTION = "default"

SharedData = Dict[str, Any]
Params = Dict[str, Any]


class UsageError(RuntimeError):
    """Raised when the engine is driven in a way it does not support."""


async def resolve(value: Any) -> Any:
    """Await ``value`` if a hook returned an awaitable, else pass it through."""
    if inspect.isawaitable(value):
        return await value
    return value


class Node:
    """
    A node in the workflow graph.

    Subclasses override the lifecycle hooks. The node holds its own
    ``params`` (replaced by a Flow before every orchestrated step) and a
    mapping of action label -> successor node.

    Usage:
        class Greet(Node):
            async def prepare(self, shared):
                return shared["name"]

            async def execute(self, name):
                return f"Hello, {name}"

            async def post_process(self, shared, prep_result, exec_result):
                shared["greeting"] = exec_result

        await Greet().run({"name": "Ada"})
    """

    def __init__(self):
        self.params: Params = {}
        self.successors: Dict[str, "Node"] = {}

    @property
    def name(self) -> str:
        """Display name used in log messages."""
        return type(self).__name__

    def set_params(self, params: Params) -> None:
        """Replace this node's params wholesale."""
        self.params = params

    def add_successor(self, node: "Node", action: str = DEFAULT_ACTION) -> "Node":
        """
        Register ``node`` as the successor for ``action``.

        An existing edge for the same action is overwritten with a warning.

        Args:
            node: The node to run next
            action: Action label selecting this edge

        Returns:
            The node just added, for chaining
        """
        if not isinstance(action, str):
            raise TypeError(
                f"Action must be a string, got {type(action).__name__}"
            )
        if action in self.successors:
            logger.warning(f"Overwriting successor for action '{action}' on {self.name}")
        self.successors[action] = node
        return node

    def then(self, node: "Node") -> "Node":
        """Wire ``node`` under the default action and return it."""
        return self.add_successor(node)

    def on(self, action: str) -> "ConditionalTransition":
        """Start a labeled edge: ``a.on("ok").to(b)``."""
        if not isinstance(action, str):
            raise TypeError(
                f"Action must be a string, got {type(action).__name__}"
            )
        return ConditionalTransition(self, action)

    # Lifecycle hooks ------------------------------------------------------

    async def prepare(self, shared: SharedData) -> Any:
        return None

    async def execute(self, prep_result: Any) -> Any:
        return None

    async def post_process(
        self,
        shared: SharedData,
        prep_result: Any,
        exec_result: Any
    ) -> Optional[str]:
        return None

    # Execution ------------------------------------------------------------

    async def _execute_with_policy(self, prep_result: Any) -> Any:
        return await resolve(self.execute(prep_result))

    async def _run_step(self, shared: SharedData) -> Any:
        """Run prepare, execute and post_process once, in order."""
        prep_result = await resolve(self.prepare(shared))
        exec_result = await self._execute_with_policy(prep_result)
        return await resolve(self.post_process(shared, prep_result, exec_result))

    async def run(self, shared: SharedData) -> Any:
        """
        Run this node on its own.

        Successors are never followed here; wrap the node in a Flow for that.

        Args:
            shared: The shared state dictionary

        Returns:
            Whatever post_process returned
        """
        if self.successors:
            logger.warning(f"{self.name} won't run successors. Use Flow.")
        return await self._run_step(shared)

    def __repr__(self) -> str:
        return f"{self.name}(successors={list(self.successors.keys())})"


class ConditionalTransition:
    """A pending labeled edge from ``source``, completed by ``to``."""

    def __init__(self, source: Node, action: str):
        self.source = source
        self.action = action

    def to(self, target: Node) -> Node:
        return self.source.add_successor(target, self.action)


def connect(source: Node, target: Node, action: str = DEFAULT_ACTION) -> Node:
    """
    Wire ``source`` to ``target`` under ``action``.

    Returns:
        The target node, so calls can be chained
    """
    return source.add_successor(target, action)
