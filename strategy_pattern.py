from abc import ABC, abstractmethod


class Context:
    def __init__(self, strategy=None):
        self._strategy = strategy

    @property
    def strategy(self):
        return self._strategy

    @strategy.setter
    def strategy(self, strategy):
        self._strategy = strategy

    def do_something(self):
        if self._strategy is None:
            print("Context: Strategy isn't set")
            return
        print("Context: Execute strategy:")
        print(self._strategy.execute())


class Strategy(ABC):
    @abstractmethod
    def execute(self, data=None):
        pass


class ConcreteStrategyA(Strategy):
    def __init__(self, number):
        self._number = number

    def execute(self, data=None):
        return f'Doing something using Strategy A - Internal data "{self._number}"'


class ConcreteStrategyB(Strategy):
    def __init__(self, text):
        self._text = text

    def execute(self, data=None):
        return f'Doing something using Strategy B - Internal data "{self._text}"'


def main():
    context = Context()
    print("Client: Running without Strategy.")
    context.do_something()
    print()

    context = Context(ConcreteStrategyA(100))
    print("Client: Running using Strategy A.")
    context.do_something()
    print()

    print("Client: Running using Strategy B.")
    context.strategy = ConcreteStrategyB("abcd")
    context.do_something()


if __name__ == "__main__":
    main()
