"""
This module contains shared fixtures for testing.
"""

from types import SimpleNamespace

import pytest

from stubloom import AttachableModel, DeclarationTree, has_many_attached, has_one_attached
from stubloom.options import reset_stubloom_options, set_stubloom_option


@pytest.fixture(autouse=True)
def _reset_options():
    """Every test starts and ends with default options."""
    reset_stubloom_options()
    yield
    reset_stubloom_options()


@pytest.fixture
def tree() -> DeclarationTree:
    """A fresh, empty declaration tree."""
    return DeclarationTree()


@pytest.fixture
def models() -> SimpleNamespace:
    """A small model hierarchy below its own abstract root.

    - Post: photo (single), blogs (multiple)
    - Draft: abstract, with a cover attachment
    - Comment: no attachments
    """

    class ApplicationRecord(AttachableModel):
        __abstract__ = True

    class Post(ApplicationRecord):
        photo = has_one_attached()
        blogs = has_many_attached()

    class Draft(ApplicationRecord):
        __abstract__ = True
        cover = has_one_attached()

    class Comment(ApplicationRecord):
        pass

    return SimpleNamespace(
        ApplicationRecord=ApplicationRecord, Post=Post, Draft=Draft, Comment=Comment
    )


@pytest.fixture
def rooted_models(models) -> SimpleNamespace:
    """The `models` hierarchy, registered as the enumeration root."""
    set_stubloom_option("root_model", models.ApplicationRecord)
    return models
