import graphviz
import pandas as pd
import pytest

from stubloom import AttachmentCompiler, DeclarationGraph
from stubloom._errors import InvalidDeclarationCollectionError
from stubloom.core import DeclarationMatrix


@pytest.fixture
def post_tree(tree, models):
    AttachmentCompiler().decorate(tree, models.Post)
    return tree


@pytest.mark.graph
@pytest.mark.smoke
def test_graph_build_smoke_no_legend(post_tree, models):
    g = DeclarationGraph(post_tree).build(legend=False)

    assert isinstance(g, graphviz.Digraph)
    src = g.source
    assert "label=photo" in src
    assert "label=blogs" in src
    assert "AttachedOne" in src
    assert "AttachedMany" in src
    assert "cluster_legend" not in src


@pytest.mark.graph
def test_graph_edges_and_colors(post_tree, models):
    graph = DeclarationGraph(post_tree)
    g = graph.build()
    path = post_tree.get(models.Post).path

    assert graph.graph.has_edge(path, f"{path}.photo")
    assert graph.graph.has_edge(f"{path}.photo", "AttachedOne")
    assert graph.graph.has_edge(f"{path}.blogs", "AttachedMany")
    # Setters are not drawn as separate attributes
    assert f"{path}.photo=" not in graph.graph

    src = g.source
    assert 'fillcolor="#9999ff"' in src  # classes
    assert 'fillcolor="#99ff99"' in src  # attributes
    assert 'fillcolor="#fbec5d"' in src  # handle types
    assert "cluster_legend" in src


@pytest.mark.graph
def test_graph_empty_tree(tree):
    g = DeclarationGraph(tree).build(legend=False)

    assert isinstance(g, graphviz.Digraph)
    assert "->" not in g.source


@pytest.mark.graph
def test_graph_requires_tree():
    with pytest.raises(TypeError, match="must be a DeclarationTree"):
        DeclarationGraph({"a": {}})


@pytest.mark.graph
def test_build_matrix(post_tree, models):
    matrix = DeclarationGraph(post_tree).build_matrix()
    path = post_tree.get(models.Post).path

    assert isinstance(matrix, pd.DataFrame)
    assert list(matrix.index) == ["blogs", "photo"]
    assert list(matrix.columns) == [path]
    assert matrix.loc["photo", path] == "AttachedOne"
    assert matrix.loc["blogs", path] == "AttachedMany"


@pytest.mark.graph
def test_matrix_marks_undeclared_and_setter_only():
    matrix = DeclarationMatrix(
        {
            "app.A": {"photo": {"return_type": "AttachedOne"}},
            "app.B": {"scan=": {"parameters": [("attachable", "Unknown")], "return_type": "Unknown"}},
        }
    ).build()

    assert matrix.loc["photo", "app.B"] == ""
    assert matrix.loc["scan", "app.B"] == "setter only"
    assert matrix.loc["scan", "app.A"] == ""


def test_matrix_empty():
    assert DeclarationMatrix({}).build().empty


def test_matrix_raises_on_non_mapping_collection():
    with pytest.raises(InvalidDeclarationCollectionError, match="must be a mapping"):
        DeclarationMatrix([("app.A", {})])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("collection", "match"),
    [
        ({1: {}}, "Class paths must be strings"),
        ({"app.A": []}, "Class declarations must be a dictionary"),
        ({"app.A": {"photo": "AttachedOne"}}, "Method declarations must be a dictionary"),
        ({"app.A": {"photo": {"return_type": 1}}}, "Return types must be strings"),
        (
            {"app.A": {"photo": {"return_type": "X", "parameters": "attachable"}}},
            "Parameters must be a list",
        ),
    ],
)
def test_matrix_validation_errors(collection, match):
    with pytest.raises(InvalidDeclarationCollectionError, match=match):
        DeclarationMatrix(collection)
