"""Node tree models and the JSON wire codec for layout snapshots."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter, ValidationError

from layoutsync.exceptions import ParseError

SYNC_FLAG = "syncCrossPlatform"


class Node(BaseModel):
    """A single editor node as serialized in a layout snapshot.

    Only the fields the reconciler reasons about are typed strictly; any other
    key the editor writes is kept as an extra and round-trips unchanged.
    Fields are populated from their camelCase wire names only, so a
    snake_case key such as ``display_name`` stays an extra.
    """

    type: str | dict[str, JsonValue] | None = None
    is_canvas: JsonValue = Field(default=None, alias="isCanvas")
    props: dict[str, JsonValue] | None = None
    display_name: JsonValue = Field(default=None, alias="displayName")
    custom: JsonValue = None
    parent: str | None = None
    hidden: JsonValue = None
    nodes: list[str] | None = None
    linked_nodes: dict[str, str] | None = Field(default=None, alias="linkedNodes")

    model_config = ConfigDict(extra="allow", strict=True)

    @property
    def resolved_name(self) -> str | None:
        """Component kind, whether ``type`` is a plain string or ``{"resolvedName": ...}``."""
        if isinstance(self.type, str):
            return self.type
        if isinstance(self.type, dict):
            name = self.type.get("resolvedName")
            return name if isinstance(name, str) else None
        return None

    @property
    def sync_enabled(self) -> bool:
        """False only when the node explicitly opts out of cross-platform sync."""
        return not (self.props is not None and self.props.get(SYNC_FLAG) is False)


NodeTree = dict[str, Node | None]

_TREE_ADAPTER: TypeAdapter[NodeTree] = TypeAdapter(NodeTree)


def parse_tree(content: str, *, label: str = "content") -> NodeTree:
    """Parse a JSON snapshot into a node tree.

    Raises:
        ParseError: If *content* is not valid JSON or not an ``{id: node}`` object.
    """
    try:
        return _TREE_ADAPTER.validate_json(content)
    except ValidationError as exc:
        raise ParseError(f"invalid {label} tree: {exc.errors()[0]['msg']}", label=label) from exc


def dump_tree(tree: NodeTree) -> str:
    """Serialize a node tree to compact JSON, omitting keys that were never set."""
    return _TREE_ADAPTER.dump_json(tree, by_alias=True, exclude_unset=True).decode("utf-8")
