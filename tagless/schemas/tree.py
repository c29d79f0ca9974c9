"""Tree Schemas — Pydantic models for the external JSON form of a Generic Tree.

Invariants:
    - A document is a flat, post-order list of entries; the root is the last entry
    - Leaf entry: {"kind": "leaf", "text": "..."}
    - Node entry: {"kind": "node", "tag": "...", "children": [i, ...]} where every
      child index points at an EARLIER entry
    - JSON nesting depth is constant, so any tree the decoder accepts round-trips
      regardless of its height; conversion in both directions uses no recursion
    - Any tag and any child count parse; tag/arity checks belong to the decoder
    - Invalid JSON, a non-document, or a forward/out-of-range child index raises
      DecodeError(MALFORMED_TREE)

Design Decisions:
    - Discriminated union on `kind`: one model per tree variant, no guessing
    - Index references instead of nested objects: nested JSON hits the parser's
      nesting limit long before max_decode_depth
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tagless.core.errors import DecodeError
from tagless.core.tree import Leaf, Node, Tree


class LeafModel(BaseModel):
    """Leaf entry of the external tree."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["leaf"] = "leaf"
    text: str


class NodeModel(BaseModel):
    """Tagged node entry; children are indexes of earlier entries."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["node"] = "node"
    tag: str
    children: list[int] = []


TreeEntry = Annotated[Union[LeafModel, NodeModel], Field(discriminator="kind")]


class TreeDocument(BaseModel):
    """Whole tree as a post-order entry list."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: list[TreeEntry] = Field(min_length=1)


def tree_to_document(tree: Tree) -> TreeDocument:
    entries: list[LeafModel | NodeModel] = []
    emitted: list[int] = []              # entry indexes of finished subtrees
    pending: list[tuple[Tree, bool]] = [(tree, False)]
    while pending:
        current, expanded = pending.pop()
        if isinstance(current, Leaf):
            emitted.append(len(entries))
            entries.append(LeafModel(text=current.text))
            continue
        if not expanded:
            pending.append((current, True))
            for child in reversed(current.children):
                pending.append((child, False))
            continue
        split = len(emitted) - len(current.children)
        children = emitted[split:]
        del emitted[split:]
        emitted.append(len(entries))
        entries.append(NodeModel(tag=current.tag, children=children))
    return TreeDocument(nodes=entries)


def tree_from_document(document: TreeDocument) -> Tree:
    built: list[Tree] = []
    for index, entry in enumerate(document.nodes):
        if isinstance(entry, LeafModel):
            built.append(Leaf(entry.text))
            continue
        for child in entry.children:
            if not 0 <= child < index:
                raise DecodeError(
                    f"Entry {index} refers to entry {child}; children must "
                    f"point at earlier entries",
                    DecodeError.MALFORMED_TREE,
                )
        built.append(Node(entry.tag, tuple(built[c] for c in entry.children)))
    return built[-1]


def dump_tree_json(tree: Tree, indent: int | None = None) -> str:
    """Serialize a tree to its JSON form."""
    return tree_to_document(tree).model_dump_json(indent=indent)


def load_tree_json(data: str | bytes) -> Tree:
    """Parse the JSON form back into a tree. Tags and arities are not checked."""
    try:
        document = TreeDocument.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(
            f"Not a tree document: {exc.error_count()} validation error(s)",
            DecodeError.MALFORMED_TREE,
        ) from exc
    return tree_from_document(document)
