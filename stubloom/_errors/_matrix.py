"""
This module defines custom exceptions related to the `DeclarationMatrix`
class, which is used for creating a tabular representation of a declaration
tree.

`InvalidDeclarationCollectionError`:
This `ValueError` is raised when the `DeclarationMatrix` is initialized with a
data structure that does not conform to its expected input format. The matrix
builder requires a dictionary mapping class paths to their method
declarations, and this exception ensures that malformed inputs are caught early
with a descriptive error message.
"""


class InvalidDeclarationCollectionError(ValueError):
    """Raised when DeclarationMatrix receives an invalid or malformed collection.

    Expected a mapping of the form:
    {
        class_path: {
            method_name: {
                "parameters": list[tuple[str, str]],
                "return_type": str,
            }
        }
    }
    - Missing "parameters" is tolerated (treated as empty), but wrong types are not.
    """

    def __init__(self, detail: str):
        """Initialize the InvalidDeclarationCollectionError with a detailed message."""
        super().__init__(f"Invalid declaration collection for DeclarationMatrix: {detail}")


def _validate_declaration_collection(collection: dict) -> dict:
    """Validate type of the declaration collection.

    Iterates through the collection and checks that all class paths are
    strings, all values are dictionaries of method declarations keyed by
    string names, and that every declaration carries a string return type.

    Args:
        collection (dict): The collection to validate.

    Returns:
        dict: The validated collection.

    Raises:
        InvalidDeclarationCollectionError: If the collection is malformed.
    """
    if not isinstance(collection, dict):
        raise InvalidDeclarationCollectionError("Collection must be a dictionary")

    for path, methods in collection.items():
        if not isinstance(path, str):
            raise InvalidDeclarationCollectionError("Class paths must be strings")
        if not isinstance(methods, dict):
            raise InvalidDeclarationCollectionError("Class declarations must be a dictionary")
        for name, signature in methods.items():
            if not isinstance(name, str):
                raise InvalidDeclarationCollectionError("Method names must be strings")
            if not isinstance(signature, dict):
                raise InvalidDeclarationCollectionError("Method declarations must be a dictionary")
            if not isinstance(signature.get("return_type"), str):
                raise InvalidDeclarationCollectionError("Return types must be strings")
            if not isinstance(signature.get("parameters", []), (list, tuple)):
                raise InvalidDeclarationCollectionError("Parameters must be a list")

    return collection
