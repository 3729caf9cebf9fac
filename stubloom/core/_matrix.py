"""
This module defines the DeclarationMatrix class, which provides a tabular,
matrix-like view of the attributes declared across all classes of a
declaration tree. It serves as an introspection tool for reviewing what a
generation run is about to emit.

- **Rows**: All attribute names declared by any class.
- **Columns**: The class paths of the tree.
- **Cells**: The getter's return type (e.g. "AttachedOne") if the class
  declares the attribute, "" otherwise.
"""

from collections.abc import Mapping

import pandas as pd

from stubloom._errors import (
    InvalidDeclarationCollectionError,
    _validate_declaration_collection,
)


class DeclarationMatrix:
    """Matrix view for declared attributes.

    Note:
    - This class does NOT receive the tree. It receives a declaration
      collection as produced by `DeclarationTree.to_dict()`:
      class_path -> method_name -> {"parameters": [...], "return_type": str}
    - Setter entries (names ending in "=") only mark the attribute as
      declared; the cell shows the getter's return type.
    """

    def __init__(self, collection: dict[str, dict]):
        # Validate mapping type early to give a clear error
        if collection is not None and not isinstance(collection, Mapping):
            raise InvalidDeclarationCollectionError(
                "collection must be a mapping of class_path -> dict"
            )
        self._collection = _validate_declaration_collection(dict(collection or {}))

    def build(self) -> pd.DataFrame:
        """Construct and return the declaration matrix as a pandas DataFrame."""
        row_names: set[str] = set()
        for methods in self._collection.values():
            row_names.update(name.removesuffix("=") for name in methods)

        rows = sorted(row_names)
        cols = sorted(self._collection.keys())

        # If nothing to show, return a truly empty DataFrame
        if not rows and not cols:
            return pd.DataFrame()

        data: dict[str, list[str]] = {}
        for path in cols:
            methods = self._collection[path]
            col_values: list[str] = []
            for attribute in rows:
                if attribute in methods:
                    col_values.append(methods[attribute]["return_type"])
                elif f"{attribute}=" in methods:
                    col_values.append("setter only")
                else:
                    col_values.append("")
            data[path] = col_values

        return pd.DataFrame(data, index=rows, columns=cols)
