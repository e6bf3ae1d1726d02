import pytest

from template_method_pattern import AbstractClass, ConcreteClass1, ConcreteClass2, main, run_client


def test_required_steps_must_be_implemented():
    class Incomplete(AbstractClass):
        def execute_step_3(self):
            pass

    with pytest.raises(TypeError):
        Incomplete()


def test_concrete_class_1(capsys):
    run_client(ConcreteClass1())
    assert capsys.readouterr().out.splitlines() == [
        "AbstractClass: Implements step 1",
        "AbstractClass: Implements step 2",
        "ConcreteClass1: Implements step 3",
        "ConcreteClass1: Implements step 4",
    ]


def test_concrete_class_2_overrides_hook(capsys):
    run_client(ConcreteClass2())
    assert capsys.readouterr().out.splitlines()[-1] == "ConcreteClass2: Implements step 5"


def test_steps_run_in_order():
    calls = []

    class Recording(AbstractClass):
        def execute_step_1(self):
            calls.append(1)

        def execute_step_2(self):
            calls.append(2)

        def execute_step_3(self):
            calls.append(3)

        def execute_step_4(self):
            calls.append(4)

        def execute_step_5(self):
            calls.append(5)

        def execute_step_6(self):
            calls.append(6)

    Recording().execute_algorithm()
    assert calls == [1, 2, 3, 4, 5, 6]


def test_main(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("Same client code can work with different subclasses:") == 2
    assert len(lines) == 12
