"""
Flow orchestration.

A Flow walks a graph of nodes from its start node, following the edge
labeled by each node's action, until a node has no matching successor.
A Flow is itself a Node, so it can be wired as a successor inside another
Flow. BatchFlow repeats the walk once per parameter set.
"""

from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass
import logging
import time

from nodeflow.engine.node import DEFAULT_ACTION, Node, Params, SharedData, UsageError, resolve


logger = logging.getLogger(__name__)


@dataclass
class StepRecord:
    """A single orchestrated step, reported to the ``on_step`` callback."""
    node: Node
    action: Optional[str]
    duration_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node": self.node.name,
            "action": self.action,
            "duration_ms": self.duration_ms,
        }


class Flow(Node):
    """
    Sequential traversal of a node graph driven by action labels.

    Usage:
        a.on("ok").to(b)
        a.on("fail").to(c)
        flow = Flow(start=a)
        await flow.run(shared)

    Attributes:
        start: The first node of every walk
        on_step: Optional callback invoked with a StepRecord after each step
    """

    def __init__(
        self,
        start: Node,
        on_step: Optional[Callable[[StepRecord], Any]] = None
    ):
        super().__init__()
        self.start = start
        self.on_step = on_step

    def next(self, current: Node, action: Optional[str] = None) -> Optional[Node]:
        """
        Get the successor of ``current`` for ``action``.

        Args:
            current: The node that just ran
            action: Its action label (None selects the default edge)

        Returns:
            The next node, or None when the walk ends here
        """
        successor = current.successors.get(action or DEFAULT_ACTION)
        if successor is None and current.successors:
            logger.warning(
                f"Flow ends: '{action}' not found in {list(current.successors.keys())}"
            )
        return successor

    async def orchestrate(
        self,
        shared: SharedData,
        extra_params: Optional[Params] = None
    ) -> None:
        """
        Walk the graph from ``start`` until no successor matches.

        Every visited node gets a fresh params dict built from this flow's
        params overlaid with ``extra_params``.

        Args:
            shared: The shared state dictionary
            extra_params: Params layered over this flow's own params
        """
        extra_params = extra_params or {}
        current: Optional[Node] = self.start

        while current is not None:
            current.set_params({**self.params, **extra_params})

            logger.debug(f"Running node: {current.name}")
            step_start = time.time()
            result = await current._run_step(shared)
            action = result if isinstance(result, str) else None

            if self.on_step:
                await self._notify(StepRecord(
                    node=current,
                    action=action or DEFAULT_ACTION,
                    duration_ms=(time.time() - step_start) * 1000,
                ))

            current = self.next(current, action)

    async def _notify(self, step: StepRecord) -> None:
        try:
            await resolve(self.on_step(step))
        except Exception as e:
            logger.warning(f"Step callback failed: {e}")

    async def _run_step(self, shared: SharedData) -> Any:
        prep_result = await resolve(self.prepare(shared))
        await self.orchestrate(shared)
        return await resolve(self.post_process(shared, prep_result, None))

    async def execute(self, prep_result: Any) -> Any:
        raise UsageError("Flow cannot execute")

    def __repr__(self) -> str:
        return f"{self.name}(start={self.start.name})"


class BatchFlow(Flow):
    """
    Runs the contained flow once per parameter set returned by ``prepare``.

    Passes run strictly one after another against the same shared state,
    so their side effects accumulate.
    """

    async def _run_step(self, shared: SharedData) -> Any:
        batch_params: List[Params] = list(await resolve(self.prepare(shared)) or [])
        logger.debug(f"{self.name} running {len(batch_params)} pass(es)")
        for params in batch_params:
            await self.orchestrate(shared, {**self.params, **params})
        return await resolve(self.post_process(shared, batch_params, None))
