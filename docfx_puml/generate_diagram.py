"""Pipeline that turns declarations into a finished diagram document."""

import logging
from collections.abc import Iterable

from docfx_puml.declaration import Declaration
from docfx_puml.index_namespaces import index_namespaces
from docfx_puml.infer_relationships import infer_relationships
from docfx_puml.render_diagram import render_diagram

logger = logging.getLogger(__name__)


def generate_diagram(declarations: Iterable[Declaration]) -> str:
    """Index, infer relationships and render in one pass.

    Nothing is kept between calls; the result is always a full document.
    """
    decls = list(declarations)
    packages = index_namespaces(decls)
    edges = infer_relationships(decls)
    logger.info(
        "Rendering %d declarations in %d packages with %d relationships",
        len(decls),
        len(packages),
        len(edges),
    )
    return render_diagram(packages, edges)
