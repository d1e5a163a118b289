"""Document renderers for enumerated records.

Each renderer is a pure function of ``(records, root, options)`` returning the
full text document; writing it anywhere is the output sink's job.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..file_tree_model import FileRecord
from ..options import ListOptions, OutputFormat
from .flat_list import render_list
from .json_doc import render_json
from .tree import render_tree

Renderer = Callable[[Sequence[FileRecord], str, ListOptions], str]

RENDERERS: dict[OutputFormat, Renderer] = {
    OutputFormat.TREE: render_tree,
    OutputFormat.JSON: render_json,
    OutputFormat.LIST: render_list,
}


def render_document(records: Sequence[FileRecord], root: str, options: ListOptions) -> str:
    """Render ``records`` with the renderer selected by ``options.output_format``."""
    return RENDERERS[options.output_format](records, root, options)


__all__ = ["Renderer", "RENDERERS", "render_document", "render_tree", "render_json", "render_list"]
