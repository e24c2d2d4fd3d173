"""Logic for grouping declarations into per-namespace packages."""

import logging
from collections.abc import Iterable

from docfx_puml.declaration import Declaration
from docfx_puml.namespace_of import namespace_of
from docfx_puml.namespace_package import NamespacePackage

logger = logging.getLogger(__name__)


def index_namespaces(
    declarations: Iterable[Declaration],
) -> dict[str, NamespacePackage]:
    """Group declarations by namespace, keeping discovery order per package."""
    packages: dict[str, NamespacePackage] = {}
    for decl in declarations:
        ns = namespace_of(decl)
        package = packages.get(ns)
        if package is None:
            package = packages[ns] = NamespacePackage(ns)
        if decl.is_interface:
            package.interfaces.append(decl)
        else:
            package.classes.append(decl)
        logger.debug("Indexed %s %s under %s", decl.kind.value, decl.name, ns)
    return packages
