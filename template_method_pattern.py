from abc import ABC, abstractmethod


class AbstractClass(ABC):
    """
    Defines the skeleton of an algorithm. Steps 1 and 2 are fixed, steps 3
    and 4 must be provided by subclasses, steps 5 and 6 are optional hooks.
    """

    def execute_algorithm(self):
        self.execute_step_1()
        self.execute_step_2()
        self.execute_step_3()
        self.execute_step_4()
        self.execute_step_5()
        self.execute_step_6()

    def execute_step_1(self):
        print("AbstractClass: Implements step 1")

    def execute_step_2(self):
        print("AbstractClass: Implements step 2")

    @abstractmethod
    def execute_step_3(self):
        pass

    @abstractmethod
    def execute_step_4(self):
        pass

    def execute_step_5(self):
        pass

    def execute_step_6(self):
        pass


class ConcreteClass1(AbstractClass):
    def execute_step_3(self):
        print("ConcreteClass1: Implements step 3")

    def execute_step_4(self):
        print("ConcreteClass1: Implements step 4")


class ConcreteClass2(AbstractClass):
    def execute_step_3(self):
        print("ConcreteClass2: Implements step 3")

    def execute_step_4(self):
        print("ConcreteClass2: Implements step 4")

    def execute_step_5(self):
        print("ConcreteClass2: Implements step 5")


def run_client(abstract_class):
    abstract_class.execute_algorithm()


def main():
    print("Same client code can work with different subclasses:")
    run_client(ConcreteClass1())
    print()

    print("Same client code can work with different subclasses:")
    run_client(ConcreteClass2())


if __name__ == "__main__":
    main()
