"""
Search Node Module - Tree nodes held in an index-addressed arena.

Nodes never point at each other directly. Each node records the arena
index of its parent, so the whole tree for one search is released by
dropping the arena.
"""

from typing import Any, Hashable, List, Optional

from .problem import Problem

# Parent index of the root node
ROOT_PARENT = -1


class SearchNode:
    """
    Node in a search tree.

    Holds a state, the action that produced it and the arena index of
    its parent. Children are never stored; they are derived on demand
    by expand(). Two nodes compare equal when their states are equal,
    regardless of how they were reached.

    Attributes:
        state: State represented by this node
        action: Action applied to the parent to get here (None on the root)
        parent: Arena index of the parent, or ROOT_PARENT
        depth: Number of actions from the root
        index: This node's position in its arena
    """

    __slots__ = ("state", "action", "parent", "depth", "index", "_arena")

    def __init__(self, arena: "NodeArena", index: int, state: Hashable,
                 action: Any = None, parent: int = ROOT_PARENT, depth: int = 0):
        self._arena = arena
        self.index = index
        self.state = state
        self.action = action
        self.parent = parent
        self.depth = depth

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent == ROOT_PARENT

    def child_node(self, problem: Problem, action: Any) -> "SearchNode":
        """
        Create the child reached by applying action to this node's state.

        Args:
            problem: Problem supplying the transition
            action: Action legal in this node's state

        Returns:
            Newly allocated child node
        """
        return self._arena.add(problem.result(self.state, action), action, self)

    def expand(self, problem: Problem) -> List["SearchNode"]:
        """
        Create one child per legal action, in the order actions() lists them.

        Args:
            problem: Problem supplying actions and transitions

        Returns:
            List of child nodes
        """
        return [self.child_node(problem, action) for action in problem.actions(self.state)]

    def path(self) -> List["SearchNode"]:
        """
        Nodes from the root to this node, root first.

        Returns:
            List of nodes along the path
        """
        nodes = []
        node: Optional[SearchNode] = self
        while node is not None:
            nodes.append(node)
            node = self._arena.parent_of(node)
        nodes.reverse()
        return nodes

    def solution(self) -> List[Any]:
        """
        Actions from the root to this node, root first.

        The root's placeholder action is never included, so the
        solution of the root itself is empty.

        Returns:
            List of actions
        """
        return [node.action for node in self.path() if not node.is_root]

    def __eq__(self, other):
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.state == other.state

    def __hash__(self):
        return hash(self.state)

    def __repr__(self):
        return (f"SearchNode(state={self.state!r}, action={self.action!r}, "
                f"depth={self.depth})")


class NodeArena:
    """
    Owns every node created during one search.

    Nodes are appended and never removed individually; clear() or
    dropping the arena releases them all at once.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, state: Hashable, action: Any = None,
            parent: Optional[SearchNode] = None) -> SearchNode:
        """
        Allocate a node.

        Args:
            state: State for the new node
            action: Action that produced it (None for the root)
            parent: Parent node, or None for the root

        Returns:
            The new node
        """
        index = len(self._nodes)
        if parent is None:
            node = SearchNode(self, index, state, action)
        else:
            node = SearchNode(self, index, state, action,
                              parent=parent.index, depth=parent.depth + 1)
        self._nodes.append(node)
        return node

    def root(self, state: Hashable) -> SearchNode:
        """Allocate a root node with no action."""
        return self.add(state)

    def parent_of(self, node: SearchNode) -> Optional[SearchNode]:
        """Return the parent of node, or None for the root."""
        if node.is_root:
            return None
        return self._nodes[node.parent]

    def clear(self) -> None:
        """
        Release every node.

        Nodes handed out earlier still hold this arena, so calling path() or
        solution() on a non-root node after clear() raises IndexError, or
        walks into unrelated nodes added later. Extract what you need first.
        """
        self._nodes.clear()

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)
