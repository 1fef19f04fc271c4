"""
Shared helpers for the test suite.
"""


class ScriptedGenerator:
    """Generator stub returning fixed draws, failing on any unexpected draw."""

    def __init__(self, integers=(), random=()):
        self.integers_draws = list(integers)
        self.random_draws = list(random)

    def integers(self, high):
        return self.integers_draws.pop(0)

    def random(self):
        return self.random_draws.pop(0)
