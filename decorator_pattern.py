from abc import ABC, abstractmethod


class Component(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass


class ConcreteComponent(Component):
    def execute(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """Wraps exactly one component and forwards work to it"""

    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def execute(self) -> str:
        return self._component.execute()


class ConcreteDecoratorA(Decorator):
    def execute(self) -> str:
        return f"ConcreteDecoratorA({super().execute()})"


class ConcreteDecoratorB(Decorator):
    def execute(self) -> str:
        return f"ConcreteDecoratorB({super().execute()})"


def client_code(component):
    print(f"RESULT: {component.execute()}")


def main():
    simple = ConcreteComponent()
    print("Client: I've got a simple component:")
    client_code(simple)
    print()

    decorator1 = ConcreteDecoratorA(simple)
    decorator2 = ConcreteDecoratorB(decorator1)
    print("Client: Now I've got a decorated component:")
    client_code(decorator2)


if __name__ == "__main__":
    main()
