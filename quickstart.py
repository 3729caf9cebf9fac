import logging
from pathlib import Path

import stubloom as sl
from stubloom.options import set_stubloom_option

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


class ApplicationRecord(sl.AttachableModel):
    __abstract__ = True


class Post(ApplicationRecord):
    photo = sl.has_one_attached()
    blogs = sl.has_many_attached()


class Draft(ApplicationRecord):
    __abstract__ = True
    cover = sl.has_one_attached()


class Comment(ApplicationRecord):
    pass


class User(ApplicationRecord):
    avatar = sl.has_one_attached()
    documents = sl.has_many_attached()


# Only enumerate the models of this script
set_stubloom_option("root_model", ApplicationRecord)


if __name__ == "__main__":
    generator = sl.Generator(sl.AttachmentCompiler())
    tree = generator.run()

    renderer = sl.PyiRenderer(tree)
    print(renderer.render_all())

    graph = sl.DeclarationGraph(tree)
    print(graph.build_matrix())

    output_dir = Path(__file__).parent / "assets" / "stubs"
    for path in renderer.write(output_dir):
        print(f"Stub written to {path}")

    # Requires the Graphviz binaries
    # graph.build().render(output_dir / "declarations", format="png", cleanup=True)
