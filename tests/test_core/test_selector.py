import logging
from abc import ABC, abstractmethod

from stubloom import AttachmentCompiler, select_candidates


class _ExplodingCapability:
    """A class whose capability check raises."""

    @classmethod
    def is_abstract_class(cls):
        raise RuntimeError("reflection backend unavailable")

    @classmethod
    def reflect_on_all_attachments(cls):
        return []


class _DuckModel:
    """Exposes the capability without inheriting from AttachableModel."""

    @classmethod
    def is_abstract_class(cls):
        return False

    @classmethod
    def reflect_on_all_attachments(cls):
        return []


class _AbstractBase(ABC):
    @abstractmethod
    def run(self): ...

    @classmethod
    def reflect_on_all_attachments(cls):
        return []


def test_abstract_class_excluded_regardless_of_metadata(models):
    """Tests that an abstract class is excluded even though it has attachments."""
    assert models.Draft.reflect_on_all_attachments()

    selected = select_candidates([models.Post, models.Draft, models.Comment])

    assert models.Draft not in selected
    assert selected == [models.Post, models.Comment]


def test_class_without_capability_excluded(models):
    class Plain:
        pass

    assert select_candidates([Plain, models.Post, object]) == [models.Post]


def test_capability_is_structural(models):
    """Tests that any class exposing the reflection surface qualifies."""
    assert select_candidates([_DuckModel]) == [_DuckModel]


def test_plain_abstract_base_is_excluded():
    assert select_candidates([_AbstractBase]) == []


def test_raising_check_means_not_qualified(models, caplog):
    """Tests that a check that raises excludes the class without propagating."""
    with caplog.at_level(logging.DEBUG, logger="stubloom"):
        selected = select_candidates([_ExplodingCapability, models.Post])

    assert selected == [models.Post]
    assert "capability check raised" in caplog.text


def test_output_keeps_order_and_drops_duplicates(models):
    selected = AttachmentCompiler.select(
        [models.Comment, models.Post, models.Comment, models.Post]
    )

    assert selected == [models.Comment, models.Post]


def test_selection_is_pure(models):
    candidates = [models.Post, models.Draft]
    first = select_candidates(candidates)
    second = select_candidates(candidates)

    assert first == second
    assert candidates == [models.Post, models.Draft]


def test_empty_input():
    assert select_candidates([]) == []
