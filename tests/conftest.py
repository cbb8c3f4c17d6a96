"""
Shared fixtures for the engine tests.
"""

import pytest

from nodeflow.engine import Node


class Recorder(Node):
    """Appends its label to shared["visited"] and returns a fixed action."""
    
    def __init__(self, label: str, action=None):
        super().__init__()
        self.label = label
        self.action = action
        self.seen_params = []
    
    async def post_process(self, shared, prep_result, exec_result):
        shared.setdefault("visited", []).append(self.label)
        self.seen_params.append(dict(self.params))
        return self.action


@pytest.fixture
def shared():
    """A fresh shared state dictionary."""
    return {}


@pytest.fixture
def make_recorder():
    """Factory for Recorder nodes."""
    return Recorder
