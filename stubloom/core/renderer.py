"""
This module renders a `DeclarationTree` into `.pyi` stub source.

Getter declarations (`photo`) become read properties and setter declarations
(`photo=`) become the matching `@photo.setter`, so that type checkers accept
both `post.photo` and `post.photo = ...`. For the tree

    photo() -> AttachedOne
    photo=(attachable: Unknown) -> Unknown

the renderer produces:

    ```python
    class Post:
        @property
        def photo(self) -> AttachedOne: ...
        @photo.setter
        def photo(self, attachable: Any) -> None: ...
    ```

A setter's declared return type is not rendered; property setters always
return `None`. A setter without a parameterless getter in its scope has no
property to attach to and is skipped with a warning. Methods declared with
parameters are rendered as plain methods.

The `Unknown` marker renders as `typing.Any`. `AttachedOne` / `AttachedMany`
are imported from the module configured by the `handle_module` option.
Classes are emitted sorted by path and methods sorted by attribute name, so
the output only changes when the declarations do.
"""

import logging
from pathlib import Path

from stubloom._utils import _get_option

from .tree import ATTACHED_MANY, ATTACHED_ONE, UNKNOWN, DeclarationTree, MethodSignature

HEADER = "# This file is auto-generated by stubloom. Do not modify directly."
INDENT = "    "

logger = logging.getLogger(__name__)


class PyiRenderer:
    """Renders the scopes of a declaration tree as `.pyi` class blocks.

    Attributes:
        tree (DeclarationTree): The tree to render.
        handle_module (str): Module the handle types are imported from.
    """

    def __init__(self, tree: DeclarationTree, handle_module: str | None = None):
        if not isinstance(tree, DeclarationTree):
            raise TypeError("'tree' must be a DeclarationTree")
        self.tree = tree
        self.handle_module = handle_module or _get_option("handle_module")

    @staticmethod
    def _type(type_name: str) -> str:
        return "Any" if type_name == UNKNOWN else type_name

    def _params(self, signature: MethodSignature) -> str:
        return ", ".join(
            ["self"] + [f"{p.name}: {self._type(p.type)}" for p in signature.parameters]
        )

    def _render_method(self, signature: MethodSignature) -> list[str]:
        attribute = signature.attribute
        return_type = self._type(signature.return_type)
        if signature.is_setter:
            params = self._params(signature)
            return [f"@{attribute}.setter", f"def {attribute}({params}) -> None: ..."]
        if signature.parameters:
            return [f"def {attribute}({self._params(signature)}) -> {return_type}: ..."]
        return [
            "@property",
            f"def {attribute}(self) -> {return_type}: ...",
        ]

    def _ordered(self, methods: dict[str, MethodSignature]) -> list[MethodSignature]:
        # Getter before setter for every attribute, which @x.setter requires
        return sorted(methods.values(), key=lambda sig: (sig.attribute, sig.is_setter))

    def render(self, path: str | type) -> str:
        """Render one class block of the tree.

        Args:
            path (str | type): The class, or its path in the tree.

        Returns:
            str: The class block, without header or imports.

        Raises:
            KeyError: If the class has no declarations in the tree.
        """
        scope = self.tree.get(path)
        if scope is None:
            raise KeyError(f"No declarations found for {path!r}")

        class_name = scope.path.rpartition(".")[2]
        lines = [f"class {class_name}:"]
        properties = {
            sig.attribute
            for sig in scope.methods.values()
            if not sig.is_setter and not sig.parameters
        }
        for signature in self._ordered(scope.methods):
            if signature.is_setter and signature.attribute not in properties:
                logger.warning(
                    "Skipping setter %r of %s: no property to attach it to",
                    signature.name,
                    scope.path,
                )
                continue
            lines.extend(INDENT + line for line in self._render_method(signature))
        if len(lines) == 1:
            lines.append(INDENT + "...")
        return "\n".join(lines) + "\n"

    def _imports(self, paths: list[str]) -> list[str]:
        used = set()
        for path in paths:
            for sig in self.tree.get(path).methods.values():
                used.add(sig.return_type)
                used.update(p.type for p in sig.parameters)
        handles = [t for t in (ATTACHED_MANY, ATTACHED_ONE) if t in used]
        imports = ["from typing import Any"]
        if handles:
            imports.append(f"from {self.handle_module} import {', '.join(handles)}")
        return imports

    def _render_document(self, paths: list[str]) -> str:
        blocks = [self.render(path) for path in paths]
        head = "\n".join([HEADER, "", *self._imports(paths)])
        return "\n\n".join([head, *blocks])

    def render_all(self) -> str:
        """Render every class of the tree into a single stub document."""
        return self._render_document(sorted(self.tree.paths()))

    def write(self, output_dir: str | Path) -> list[Path]:
        """Write one `.pyi` file per class below `output_dir`.

        A class `app.models.Post` is written to `<output_dir>/app/models/Post.pyi`.

        Args:
            output_dir (str | Path): The root directory for generated stubs.

        Returns:
            list[Path]: The written files, in path order.
        """
        output_dir = Path(output_dir)
        written = []
        for path in sorted(self.tree.paths()):
            module, _, class_name = path.rpartition(".")
            target = output_dir.joinpath(*module.split("."), f"{class_name}.pyi")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self._render_document([path]), encoding="utf-8")
            written.append(target)
        return written
