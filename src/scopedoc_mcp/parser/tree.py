"""Arena-style scope tree for one parsed file.

Every entity is registered in ``ScopeTree.nodes`` and receives a stable
integer id. Containers own their child lists; children refer back to their
owner only through the ``parent`` id, so there are no object cycles.
"""

from typing import Iterator, Optional

from .entities import Container, Entity, FileInfo, local_name


class ScopeTree:
    """Owner of every entity parsed from one file."""

    def __init__(self, file: FileInfo):
        self.file = file
        self.nodes: list[Entity] = []
        self._register(file, None)

    def _register(self, entity: Entity, parent: Optional[Container]):
        entity.id = len(self.nodes)
        entity.parent = parent.id if parent is not None else None
        self.nodes.append(entity)

    def add_child(self, parent: Container, entity: Entity) -> Entity:
        """Register entity and append it to the parent's matching collection."""
        collection = parent.collection_for(entity.kind)
        self._register(entity, parent)
        collection.append(entity)
        return entity

    def get(self, entity_id: int) -> Entity:
        return self.nodes[entity_id]

    def parent_of(self, entity: Entity) -> Optional[Container]:
        """Return the owning container, or None for the file."""
        if entity.parent is None:
            return None
        return self.nodes[entity.parent]

    def ancestors(self, entity: Entity) -> Iterator[Container]:
        """Yield owning containers from the nearest outward to the file."""
        parent = self.parent_of(entity)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)

    def get_file(self, entity: Entity) -> FileInfo:
        """Walk the parent chain to the owning file."""
        if isinstance(entity, FileInfo):
            return entity
        for ancestor in self.ancestors(entity):
            if isinstance(ancestor, FileInfo):
                return ancestor
        return self.file

    def qualified_name(self, entity: Entity) -> str:
        """Build the globally unique, link-safe name of an entity.

        Concatenates the tagged names of every ancestor, outermost first.
        Example: D_src_F_main_C_Foo_M_bar
        """
        parts = [local_name(entity)]
        for ancestor in self.ancestors(entity):
            parts.append(local_name(ancestor))
        return "".join(reversed(parts))

    def find_container(self, qualified_name: str) -> Optional[Container]:
        """Return the first container whose qualified name matches."""
        for node in self.nodes:
            if isinstance(node, Container) and self.qualified_name(node) == qualified_name:
                return node
        return None

    def clear_all(self):
        """Forget every parsed entity except the file itself."""
        self.file.clear_all()
        self.nodes = []
        self._register(self.file, None)
