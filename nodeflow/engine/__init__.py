"""
Engine package - Node lifecycle, retries, batching and flow orchestration.
"""

from nodeflow.engine.node import (
    DEFAULT_ACTION,
    ConditionalTransition,
    Node,
    UsageError,
    connect,
)
from nodeflow.engine.retry import RetryingNode, RetryPolicy
from nodeflow.engine.batch import BatchNode
from nodeflow.engine.flow import BatchFlow, Flow, StepRecord

__all__ = [
    "DEFAULT_ACTION",
    "ConditionalTransition",
    "Node",
    "UsageError",
    "connect",
    "RetryingNode",
    "RetryPolicy",
    "BatchNode",
    "Flow",
    "BatchFlow",
    "StepRecord",
]
