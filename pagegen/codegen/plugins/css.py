"""CSS module plugin: register node styles as ``node_<id>`` classes."""

from __future__ import annotations

import logging

from pagegen.codegen.module_builder import ModuleBuilder
from pagegen.codegen.render import to_identifier
from pagegen.ir.helpers import walk
from pagegen.ir.spec import Page
from pagegen.metadata.registry import MetadataRegistry

logger = logging.getLogger(__name__)


def css_class_name(node_id: str) -> str:
    return to_identifier(f"node_{node_id}")


class CssModulePlugin:
    """Registers a class per styled node (slots included) with the module builder."""

    name = "react-css-module"

    def run(self, page: Page, module_builder: ModuleBuilder, registry: MetadataRegistry) -> None:
        count = 0
        for node in walk(page.root_node):
            if not node.styles:
                continue
            class_name = css_class_name(node.id)
            module_builder.add_css_class(class_name, node.styles, node.id)
            count += 1
        if count:
            module_builder.set_stylesheet(f"./{module_builder.module_name}.module.scss")
            logger.debug("Extracted %d style rule(s) from page %s", count, page.file_name)


__all__ = ["CssModulePlugin", "css_class_name"]
