"""
nodeflow - A minimal, async-first directed-graph task engine.

Nodes run prepare -> execute -> post_process, and the action label returned
by post_process picks the next node. Flows are nodes too, so they nest.
"""

from nodeflow.engine import (
    DEFAULT_ACTION,
    BatchFlow,
    BatchNode,
    ConditionalTransition,
    Flow,
    Node,
    RetryingNode,
    RetryPolicy,
    StepRecord,
    UsageError,
    connect,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_ACTION",
    "BatchFlow",
    "BatchNode",
    "ConditionalTransition",
    "Flow",
    "Node",
    "RetryingNode",
    "RetryPolicy",
    "StepRecord",
    "UsageError",
    "connect",
]
