"""
This module provides the graph visualization of a declaration tree.

It uses the `networkx` library for graph data structure construction and the
`graphviz` library for rendering. `DeclarationGraph` draws one node per class,
one node per declared attribute and one node per handle type, with edges
class -> attribute -> handle type. This gives a quick overview of which
models carry which attachments and how they will be typed.
"""

import graphviz
from networkx import DiGraph
from pandas import DataFrame

from ._matrix import DeclarationMatrix
from .tree import DeclarationTree


class DeclarationGraph:
    """Generates and visualizes the declarations of a tree.

    Attributes:
        tree (DeclarationTree): The tree whose declarations are visualized.
        graph (DiGraph): The networkx graph built from the tree.
    """

    def __init__(self, tree: DeclarationTree):
        if not isinstance(tree, DeclarationTree):
            raise TypeError("'tree' must be a DeclarationTree")
        self.tree = tree
        self.graph = DiGraph()

    @property
    def _node_styles(self) -> dict:
        """Return the node style dictionary (shapes and colors)."""
        return {
            "constant": ("box", "#9999ff"),
            "attribute": ("box", "#99ff99"),
            "handle": ("box", "#fbec5d"),
        }

    @property
    def _legend_details(self) -> tuple[list[str], list[str]]:
        """Return the names and colors for the legend."""
        names = ["Classes", "Attributes", "Handle Types"]
        colors = [style[1] for style in self._node_styles.values()]
        return names, colors

    def _setup(self):
        """Builds the internal networkx graph from the tree's declarations."""
        self.graph.clear()
        for path, methods in self.tree.to_dict().items():
            self.graph.add_node(path, type="constant")
            for name, declaration in methods.items():
                if name.endswith("="):
                    continue
                # Attribute nodes are per class; label shows the bare name
                node = f"{path}.{name}"
                self.graph.add_node(node, type="attribute", label=name)
                self.graph.add_node(declaration["return_type"], type="handle")
                self.graph.add_edge(path, node)
                self.graph.add_edge(node, declaration["return_type"])

    @staticmethod
    def _get_graph_attr(attrs: dict[str, str] | None = None):
        """Sets default attributes for a graphviz graph."""
        graph_attr = {
            "rankdir": "LR",
            "nodesep": "0.2",
            "ranksep": "1.0",
            "fontname": "Helvetica",
            "fontsize": "10",
        }
        return graph_attr | (attrs or {})

    @staticmethod
    def _set_graph_legend(
        graph: graphviz.Digraph, names: list[str], colors: list[str]
    ) -> graphviz.Digraph:
        """Adds a legend cluster with one styled node per node type."""
        with graph.subgraph(name="cluster_legend") as c:
            c.attr(label="<<b>Legend</b>>", fontsize="12", color="black", style="rounded")
            for name, color in zip(names, colors, strict=True):
                c.node(
                    name,
                    shape="box",
                    style="filled",
                    fillcolor=color,
                    height="0.12",
                    fontsize="10",
                )

        return graph

    def build(
        self,
        graph: graphviz.Digraph | None = None,
        additional_graph_attr: dict[str, str] | None = None,
        size: int = 12,
        legend: bool = True,
    ) -> graphviz.Digraph:
        """Builds and returns the Graphviz Digraph object.

        Args:
            graph (graphviz.Digraph | None, optional): An existing graphviz
                graph to add nodes and edges to. If None, a new graph is created.
                Defaults to None.
            additional_graph_attr (dict[str, str] | None, optional): Additional
                attributes to add to the graph. Defaults to None.
            size (int, optional): The size of the graph in inches. Defaults to 12.
            legend (bool, optional): If True, includes a color-coded legend.
                Defaults to True.

        Returns:
            graphviz.Digraph: A Graphviz Digraph object. It can be rendered to
                image formats (e.g., PNG, SVG) using its `.render()` method.
        """
        self._setup()

        graph_attr = self._get_graph_attr(
            {
                "size": f"{size},{size}!",
                "label": "<<b>DeclarationGraph</b>>",
                "labelloc": "t",
            }
        )
        if isinstance(additional_graph_attr, dict):
            graph_attr.update(additional_graph_attr)

        g = graph or graphviz.Digraph(graph_attr=graph_attr)

        styles = self._node_styles
        for node, attrs in self.graph.nodes.items():
            shape, color = styles[attrs["type"]]
            g.node(
                node,
                label=attrs.get("label", node),
                shape=shape,
                style="filled",
                fillcolor=color,
                height="0.35",
            )
        for n1, n2 in self.graph.edges():
            g.edge(n1, n2)

        if legend:
            self._set_graph_legend(g, *self._legend_details)

        return g

    def build_matrix(self) -> DataFrame:
        """Construct and return a DeclarationMatrix for the tree."""
        return DeclarationMatrix(self.tree.to_dict()).build()
