from abc import ABC, abstractmethod


class Component(ABC):
    """Common interface for leaves and branches of the tree"""

    def __init__(self):
        self._parent = None

    @property
    def parent(self):
        return self._parent

    @parent.setter
    def parent(self, parent):
        self._parent = parent

    def add(self, component) -> bool:
        """Attach a child. Returns False on nodes that cannot hold children."""
        return False

    def remove(self, component) -> bool:
        """Detach a child. Returns False if nothing was removed."""
        return False

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def execute(self) -> str:
        pass


class Leaf(Component):
    def execute(self) -> str:
        return "Leaf"


class Composite(Component):
    def __init__(self):
        super().__init__()
        self._children = []

    @property
    def children(self):
        return tuple(self._children)

    def add(self, component) -> bool:
        if component is self or self._is_reachable_from(component):
            raise ValueError("Cannot add a component to its own subtree")
        self._children.append(component)
        component.parent = self
        return True

    def remove(self, component) -> bool:
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                component.parent = None
                return True
        return False

    def is_composite(self) -> bool:
        return True

    def execute(self) -> str:
        results = []
        for child in self._children:
            results.append(child.execute())
        return f"Branch({'+'.join(results)})"

    def _is_reachable_from(self, component) -> bool:
        # Walks down from component; parent links are unreliable once a
        # node has been added under more than one branch.
        stack = [component]
        seen = set()
        while stack:
            node = stack.pop()
            if node is self:
                return True
            if id(node) in seen or not node.is_composite():
                continue
            seen.add(id(node))
            stack.extend(node.children)
        return False


def client_code(component):
    print(f"RESULT: {component.execute()}")


def client_code_2(component1, component2):
    """Works with any component without checking its concrete class"""
    if component1.is_composite():
        component1.add(component2)
    print(f"RESULT: {component1.execute()}")


def main():
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)
    print()

    tree = Composite()
    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2 = Composite()
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)

    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print()

    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code_2(tree, simple)


if __name__ == "__main__":
    main()
