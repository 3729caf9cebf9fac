"""
This module contains the generation loop for stubloom.

The `Generator` class is the central orchestrator of the library. It visits
every processable constant of every compiler and lets the compiler decorate
the shared `DeclarationTree`.

Its key responsibilities include:
- **Validation**: The compiler collection and the tree are checked up front
  by `CompilerValidator`.
- **Failure isolation**: A compiler failing on one class must not prevent
  decoration of the others. Each failure is wrapped in a
  `ConstantDecorationError`, logged and stored in `failures`, and the loop
  moves on to the next class.
- **Metadata collection**: For every visited class, the time spent and the
  number of declarations it added are stored in `collector`, keyed by class
  path and compiler name. Classes that failed or added nothing are recorded
  too.

Each call to `run` starts with empty `failures` and `collector`, so they only
ever describe the latest run.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable

from stubloom._errors import CompilerValidator, ConstantDecorationError
from stubloom._utils import TaskProfiler, _auto_convert_time_delta, _qualified_path

from .compiler import _BaseCompiler
from .tree import DeclarationTree

logger = logging.getLogger(__name__)


class Generator:
    """Runs compilers over their constants and collects declarations in a tree.

    Attributes:
        compilers (list[_BaseCompiler]): The compilers to run, in order.
        tree (DeclarationTree): The tree every compiler writes into.
        failures (list[ConstantDecorationError]): Failures isolated during `run`.
        collector (defaultdict): Per class path, per compiler metadata about
            each decoration of the latest run: time spent and declarations
            added.
    """

    def __init__(
        self,
        compilers: Iterable[_BaseCompiler] | _BaseCompiler,
        tree: DeclarationTree | None = None,
    ):
        """Initializes the Generator.

        Args:
            compilers (Iterable[_BaseCompiler] | _BaseCompiler): One compiler
                or a sequence of compilers.
            tree (DeclarationTree | None, optional): An existing tree to write
                into, e.g. one shared with other generators. Defaults to a new
                empty tree.
        """
        if isinstance(compilers, _BaseCompiler):
            compilers = [compilers]
        self.compilers = list(compilers) if isinstance(compilers, Iterable) else compilers
        self.tree = DeclarationTree() if tree is None else tree
        self.failures: list[ConstantDecorationError] = []
        self.collector = defaultdict(dict)

        CompilerValidator(self.compilers, self.tree).validate()

    def _decorate(self, compiler: _BaseCompiler, constant: type) -> None:
        """Decorates a single constant, isolating and recording any failure."""
        profiler = TaskProfiler(
            compiler.decorate,
            tree=self.tree,
            track_time=True,
            track_methods=True,
            constant=constant,
        )
        try:
            profiler.run(self.tree, constant)
        except Exception as e:  # noqa: BLE001
            failure = ConstantDecorationError(constant, compiler.name, e)
            failure.__cause__ = e
            self.failures.append(failure)
            logger.warning("%s", failure)
        finally:
            self.collector[_qualified_path(constant)][compiler.name] = {
                "delta_time": profiler.delta_time,
                "methods": profiler.methods_added,
            }

    def run(self) -> DeclarationTree:
        """Runs every compiler over its processable constants.

        Returns:
            DeclarationTree: The tree holding all declarations of this run.
        """
        self.failures = []
        self.collector = defaultdict(dict)

        for compiler in self.compilers:
            constants = compiler.processable_constants()
            logger.debug("%s: %d constant(s) to decorate", compiler.name, len(constants))
            for constant in constants:
                self._decorate(compiler, constant)

        total_time = sum(
            entry["delta_time"] for per_class in self.collector.values()
            for entry in per_class.values()
        )
        logger.info(
            "Generated declarations for %d class(es) in %s, %d failure(s)",
            len(self.tree),
            _auto_convert_time_delta(total_time),
            len(self.failures),
        )
        return self.tree
