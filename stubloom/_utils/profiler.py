"""
This module provides a profiling utility for compiler runs, used by the
`Generator` to track how long each class takes to decorate and how many
declarations it contributed to the tree.
"""

import time
from collections.abc import Callable
from typing import Any


def _count_methods(tree: Any, constant: type | str | None = None) -> int:
    if constant is not None:
        return len(tree.get(constant) or ())
    return sum(len(scope) for scope in tree)


class TaskProfiler:
    """
    An executor that runs a task and conditionally tracks its execution time
    and the number of declarations added to a tree.

    When `constant` is given, only the declarations of that class are counted;
    otherwise every scope of the tree is.
    """

    def __init__(
        self,
        task: Callable,
        tree: Any = None,
        track_time: bool = False,
        track_methods: bool = False,
        constant: type | str | None = None,
    ):
        self._task = task
        self._tree = tree
        self._track_time = track_time
        self._track_methods = track_methods
        self._constant = constant

        # Initialize result attributes safely
        self.delta_time: float = 0
        self.methods_added: int = 0

        # Validation
        if self._track_methods and tree is None:
            raise TypeError("If 'track_methods' is True, a tree must be provided.")

    def _count(self) -> int:
        return _count_methods(self._tree, self._constant)

    def run(self, *args, **kwargs) -> Any:
        """
        Executes the task, records all metrics, and returns the result.
        """
        methods_before = self._count() if self._track_methods else 0

        if self._track_time:
            t0 = time.perf_counter()

        try:
            return self._task(*args, **kwargs)
        finally:
            # Metrics are recorded even when the task raises
            if self._track_time:
                self.delta_time = time.perf_counter() - t0
            if self._track_methods:
                self.methods_added = self._count() - methods_before
