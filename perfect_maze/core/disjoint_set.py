from typing import Dict, Generic, Hashable, List, TypeVar

T = TypeVar('T', bound=Hashable)


class DisjointSet(Generic[T]):
    """
    Union-find where every member points straight at its set's root and
    the root keeps the full member list, so a union re-parents the absorbed
    set in bulk.

    The first argument's root always survives a union.
    """

    def __init__(self):
        self._parent: Dict[T, T] = {}
        # Only meaningful for roots
        self._members: Dict[T, List[T]] = {}

    def make_set(self, item: T):
        if item in self._parent:
            raise ValueError(f"{item!r} is already registered")
        self._parent[item] = item
        self._members[item] = [item]

    def find(self, item: T) -> T:
        try:
            root = self._parent[item]
        except KeyError:
            raise KeyError(f"{item!r} was never registered with make_set") from None
        # Members always point at the root after a union
        return self._parent[root]

    def union(self, a: T, b: T) -> bool:
        """Merges b's set into a's. Returns False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        absorbed = self._members.pop(root_b)
        for member in absorbed:
            self._parent[member] = root_a
        self._members[root_a].extend(absorbed)
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def members(self, item: T) -> List[T]:
        return list(self._members[self.find(item)])

    @property
    def set_count(self) -> int:
        return len(self._members)

    def __contains__(self, item) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)
