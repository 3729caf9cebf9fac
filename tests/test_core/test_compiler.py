import pytest

from stubloom import (
    AttachableModel,
    AttachmentCompiler,
    AttachmentReflection,
    Cardinality,
    has_one_attached,
)
from stubloom.core import ATTACHED_MANY, ATTACHED_ONE, UNKNOWN, MethodSignature, Parameter
from stubloom.core.compiler import _BaseCompiler
from stubloom.options import set_stubloom_option

SETTER_PARAMS = (Parameter("attachable", UNKNOWN),)


def _reflecting(*reflections):
    """Build a concrete class reflecting the given records."""

    class Reflecting(AttachableModel):
        @classmethod
        def reflect_on_all_attachments(cls):
            return list(reflections)

    return Reflecting


@pytest.mark.smoke
def test_post_declarations(tree, models):
    """Tests the getter and setter declared for each attachment of Post."""
    AttachmentCompiler().decorate(tree, models.Post)

    assert tree.get(models.Post).methods == {
        "photo": MethodSignature("photo", (), ATTACHED_ONE),
        "photo=": MethodSignature("photo=", SETTER_PARAMS, UNKNOWN),
        "blogs": MethodSignature("blogs", (), ATTACHED_MANY),
        "blogs=": MethodSignature("blogs=", SETTER_PARAMS, UNKNOWN),
    }


def test_mixin_attachments_are_declared(tree):
    """Tests that attachments inherited from a mixin get both signatures."""

    class Avatared:
        avatar = has_one_attached()

    class User(AttachableModel, Avatared):
        pass

    AttachmentCompiler().decorate(tree, User)

    assert set(tree.get(User).methods) == {"avatar", "avatar="}
    assert tree.get(User)["avatar"].return_type == ATTACHED_ONE


def test_no_attachments_creates_no_path(tree, models):
    """Tests that a class without attachments never appears in the tree."""
    AttachmentCompiler().decorate(tree, models.Comment)

    assert models.Comment not in tree
    assert len(tree) == 0


def test_two_signatures_per_attachment(tree):
    names = [f"file_{i}" for i in range(5)]
    constant = _reflecting(*(AttachmentReflection(n, Cardinality.SINGLE) for n in names))

    AttachmentCompiler().decorate(tree, constant)
    methods = tree.get(constant).methods

    assert len(methods) == 2 * len(names)
    assert [m for m in methods if not m.endswith("=")] == names
    assert all(methods[f"{n}="].parameters == SETTER_PARAMS for n in names)


def test_decorate_is_idempotent(tree, models):
    """Tests that decorating twice leaves the same tree as decorating once."""
    compiler = AttachmentCompiler()
    compiler.decorate(tree, models.Post)
    once = tree.to_dict()

    compiler.decorate(tree, models.Post)

    assert tree.to_dict() == once
    assert len(tree) == 1


@pytest.mark.parametrize(
    ("cardinality", "expected"),
    [
        (Cardinality.SINGLE, ATTACHED_ONE),
        (Cardinality.MULTIPLE, ATTACHED_MANY),
        (Cardinality.UNKNOWN, UNKNOWN),
        ("single", ATTACHED_ONE),
        ("multiple", ATTACHED_MANY),
        ("through", UNKNOWN),
        (None, UNKNOWN),
    ],
)
def test_classification(tree, cardinality, expected):
    """Tests getter classification; setters are Unknown whatever the cardinality."""
    constant = _reflecting(AttachmentReflection("file", cardinality))

    AttachmentCompiler().decorate(tree, constant)
    scope = tree.get(constant)

    assert scope["file"].return_type == expected
    assert scope["file"].parameters == ()
    assert scope["file="].return_type == UNKNOWN
    assert scope["file="].parameters == SETTER_PARAMS


def test_duplicate_names_last_write_wins(tree):
    constant = _reflecting(
        AttachmentReflection("file", Cardinality.SINGLE),
        AttachmentReflection("other", Cardinality.SINGLE),
        AttachmentReflection("file", Cardinality.MULTIPLE),
    )

    AttachmentCompiler().decorate(tree, constant)
    scope = tree.get(constant)

    assert len(scope) == 4
    assert scope["file"].return_type == ATTACHED_MANY


def test_existing_sibling_entries_are_kept(tree, models):
    """Tests that decorating does not clobber entries another compiler wrote."""
    tree.create_path(models.Post).create_method("title", return_type="str")

    AttachmentCompiler().decorate(tree, models.Post)
    scope = tree.get(models.Post)

    assert scope["title"].return_type == "str"
    assert len(scope) == 5


def test_reflection_failure_propagates(tree):
    class Broken(AttachableModel):
        @classmethod
        def reflect_on_all_attachments(cls):
            raise LookupError("table missing")

    with pytest.raises(LookupError, match="table missing"):
        AttachmentCompiler().decorate(tree, Broken)
    assert Broken not in tree


def test_gather_constants_uses_root_model(rooted_models):
    """Tests that gathering enumerates the configured root and selects eligible classes."""
    gathered = AttachmentCompiler().gather_constants()

    assert rooted_models.Post in gathered
    assert rooted_models.Comment in gathered
    assert rooted_models.Draft not in gathered
    assert rooted_models.ApplicationRecord not in gathered


def test_processable_constants_requested(rooted_models):
    compiler = AttachmentCompiler(requested_constants=[rooted_models.Post, int])

    assert compiler.processable_constants() == [rooted_models.Post]


def test_processable_constants_excluded(rooted_models):
    set_stubloom_option("exclude_constants", "Comment")

    assert rooted_models.Comment not in AttachmentCompiler().processable_constants()
    assert rooted_models.Post in AttachmentCompiler().processable_constants()


def test_base_compiler_is_abstract():
    with pytest.raises(TypeError):
        _BaseCompiler()

    assert AttachmentCompiler().name == "AttachmentCompiler"
