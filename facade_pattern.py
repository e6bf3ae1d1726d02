from typing import Optional


class SubsystemA:
    NAME = "SubsystemA"

    def init(self) -> None:
        print(f"{self.NAME}: Initialized.")

    def deinit(self) -> None:
        print(f"{self.NAME}: Deinitialized.")

    def do_something(self) -> None:
        print(f"{self.NAME}: Doing something.")


class SubsystemB:
    NAME = "SubsystemB"

    def init(self) -> None:
        print(f"{self.NAME}: Initialized.")

    def deinit(self) -> None:
        print(f"{self.NAME}: Deinitialized.")

    def do_something(self) -> None:
        print(f"{self.NAME}: Doing something.")


class Facade:
    """Single entry point that drives whichever subsystems it was built with"""

    def __init__(self, has_subsystem_a: bool, has_subsystem_b: bool):
        self._subsystem_a: Optional[SubsystemA] = SubsystemA() if has_subsystem_a else None
        self._subsystem_b: Optional[SubsystemB] = SubsystemB() if has_subsystem_b else None

    def _subsystems(self):
        return [s for s in (self._subsystem_a, self._subsystem_b) if s is not None]

    def init(self) -> None:
        print("Facade initializes subsystems:")
        for subsystem in self._subsystems():
            subsystem.init()

    def deinit(self) -> None:
        print("Facade deinitializes subsystems:")
        for subsystem in self._subsystems():
            subsystem.deinit()

    def build(self) -> None:
        print("Facade' subsystems perform the action:")
        for subsystem in self._subsystems():
            subsystem.do_something()


def run_client(has_subsystem_a: bool, has_subsystem_b: bool) -> None:
    facade = Facade(has_subsystem_a, has_subsystem_b)
    facade.init()
    facade.build()
    facade.deinit()
    print()


def main():
    print("===== Building Facade with subsystem A & B =====")
    run_client(True, True)

    print("===== Building Facade with subsystem A only =====")
    run_client(True, False)


if __name__ == "__main__":
    main()
