from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    @abstractmethod
    def method_a(self):
        pass


class ConcreteProductA1(AbstractProductA):
    def method_a(self):
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    def method_a(self):
        return "The result of the product A2."


class AbstractProductB(ABC):
    @abstractmethod
    def method_b(self):
        pass

    @abstractmethod
    def another_method_b(self, collaborator):
        """Products of one family can work with each other"""
        pass


class ConcreteProductB1(AbstractProductB):
    def method_b(self):
        return "The result of the product B1."

    def another_method_b(self, collaborator):
        result = collaborator.method_a()
        return f"The result of the B1 collaborating with ( {result} )"


class ConcreteProductB2(AbstractProductB):
    def method_b(self):
        return "The result of the product B2."

    def another_method_b(self, collaborator):
        result = collaborator.method_a()
        return f"The result of the B2 collaborating with ( {result} )"


class AbstractFactory(ABC):
    @abstractmethod
    def create_product_a(self):
        pass

    @abstractmethod
    def create_product_b(self):
        pass


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self):
        return ConcreteProductA1()

    def create_product_b(self):
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self):
        return ConcreteProductA2()

    def create_product_b(self):
        return ConcreteProductB2()


def client_code(factory):
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()
    print(product_b.method_b())
    print(product_b.another_method_b(product_a))


def main():
    print("Client: Testing client code with the 1st factory type:")
    client_code(ConcreteFactory1())
    print()

    print("Client: Testing the same client code with the 2nd factory type:")
    client_code(ConcreteFactory2())


if __name__ == "__main__":
    main()
