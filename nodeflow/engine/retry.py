"""
Retry policy for nodes whose execute step may fail transiently.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
import asyncio
import logging

from nodeflow.config import settings
from nodeflow.engine.node import Node, resolve


logger = logging.getLogger(__name__)


class RetryPolicy(BaseModel):
    """
    Bounded retry configuration.

    Attributes:
        max_retries: Total attempts, including the first one
        wait: Seconds to sleep between attempts
    """

    max_retries: int = Field(default=1, ge=1)
    wait: float = Field(default=0.0, ge=0)


class RetryingNode(Node):
    """
    A node whose execute step is retried, then handed to ``fallback``.

    Each call to the execute stage gets the full ``max_retries`` budget;
    ``current_retry`` holds the 0-based attempt currently running.

    Raises:
        pydantic.ValidationError: If max_retries < 1 or wait < 0
    """

    def __init__(self, max_retries: Optional[int] = None, wait: Optional[float] = None):
        super().__init__()
        self.policy = RetryPolicy(
            max_retries=settings.DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
            wait=settings.DEFAULT_WAIT if wait is None else wait,
        )
        self.current_retry = 0

    @property
    def max_retries(self) -> int:
        return self.policy.max_retries

    @property
    def wait(self) -> float:
        return self.policy.wait

    async def fallback(self, prep_result: Any, error: Exception) -> Any:
        """Called once retries are exhausted. Re-raises by default."""
        raise error

    async def _execute_with_policy(self, prep_result: Any) -> Any:
        for attempt in range(self.max_retries):
            self.current_retry = attempt
            try:
                return await resolve(self.execute(prep_result))
            except Exception as e:
                if attempt == self.max_retries - 1:
                    logger.warning(
                        f"{self.name} failed after {self.max_retries} attempt(s): {e}"
                    )
                    return await resolve(self.fallback(prep_result, e))
                logger.debug(
                    f"{self.name} attempt {attempt + 1}/{self.max_retries} failed: {e}"
                )
                if self.wait > 0:
                    await asyncio.sleep(self.wait)
