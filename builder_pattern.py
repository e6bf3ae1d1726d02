from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class Engine(Enum):
    """Engine types a car can be assembled with"""
    V4 = "V4"
    V6 = "V6"
    V12 = "V12"


class Car:
    """The product being assembled"""

    def __init__(self, seats: int, engine: Engine, trip_computer: bool, gps: bool):
        self._seats = seats
        self._engine = engine
        self._trip_computer = trip_computer
        self._gps = gps

    def get_seats(self) -> int:
        return self._seats

    def get_engine(self) -> Engine:
        return self._engine

    def has_trip_computer(self) -> bool:
        return self._trip_computer

    def has_gps(self) -> bool:
        return self._gps

    def __repr__(self) -> str:
        return (f"Car(seats={self._seats}, engine={self._engine.value}, "
                f"trip_computer={self._trip_computer}, gps={self._gps})")


class Builder(ABC):
    """Declares the construction steps shared by all builders"""

    @abstractmethod
    def reset(self) -> None:
        pass

    @abstractmethod
    def assemble_seat(self) -> None:
        pass

    @abstractmethod
    def assemble_engine(self) -> None:
        pass

    @abstractmethod
    def assemble_trip_computer(self) -> None:
        pass

    @abstractmethod
    def assemble_gps(self) -> None:
        pass


class CarBuilder(Builder):
    def __init__(self, seats: int, engine: Engine,
                 trip_computer: bool = False, gps: bool = False):
        if seats <= 0:
            raise ValueError("Seat count must be positive")
        self._seats = seats
        self._engine = engine
        self._trip_computer = trip_computer
        self._gps = gps
        self._car: Optional[Car] = None
        self.reset()

    def reset(self) -> None:
        self._car = Car(self._seats, self._engine, self._trip_computer, self._gps)

    def assemble_seat(self) -> None:
        if self._car is None:
            return
        print(f"Assembling {self._car.get_seats()} seats")

    def assemble_engine(self) -> None:
        if self._car is None:
            return
        print(f"Assembling engine type {self._car.get_engine().value}")

    def assemble_trip_computer(self) -> None:
        if self._car is None:
            return
        if self._car.has_trip_computer():
            print("Assembling trip computer")

    def assemble_gps(self) -> None:
        if self._car is None:
            return
        if self._car.has_gps():
            print("Assembling GPS")

    def get_result(self) -> Optional[Car]:
        """Hand over the finished car; the builder stays empty until reset()"""
        car = self._car
        self._car = None
        return car


class Director:
    """Knows which steps to run, in which order, for each configuration"""

    def make_mvp(self, builder: Builder) -> None:
        builder.assemble_seat()
        builder.assemble_engine()

    def make_full_feature(self, builder: Builder) -> None:
        builder.assemble_seat()
        builder.assemble_engine()
        builder.assemble_trip_computer()
        builder.assemble_gps()


def main():
    director = Director()
    sedan_builder = CarBuilder(5, Engine.V4, trip_computer=True, gps=False)

    director.make_mvp(sedan_builder)
    print()
    director.make_full_feature(sedan_builder)
    print(f"Built: {sedan_builder.get_result()}")


if __name__ == "__main__":
    main()
