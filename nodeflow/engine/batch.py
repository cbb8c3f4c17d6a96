"""
Batch node: fan one execute step out over a sequence of items.
"""

from typing import Any, List, Optional, Sequence
import asyncio
import logging

from nodeflow.engine.retry import RetryingNode


logger = logging.getLogger(__name__)


class BatchNode(RetryingNode):
    """
    Runs the retrying execute step once per item, concurrently.

    ``prepare`` returns the items; ``post_process`` receives the results as
    a list in input order. If any item exhausts its retries and its fallback
    raises, the whole batch raises that error.
    """

    async def _execute_with_policy(self, items: Optional[Sequence[Any]]) -> List[Any]:
        items = list(items or [])
        logger.debug(f"{self.name} running batch of {len(items)} item(s)")
        return list(await asyncio.gather(
            *(super(BatchNode, self)._execute_with_policy(item) for item in items)
        ))
