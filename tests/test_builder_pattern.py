import pytest

from builder_pattern import Builder, CarBuilder, Director, Engine, main


def test_mvp_only_assembles_seat_and_engine(capsys):
    Director().make_mvp(CarBuilder(5, Engine.V4, trip_computer=True, gps=True))
    assert capsys.readouterr().out.splitlines() == [
        "Assembling 5 seats",
        "Assembling engine type V4",
    ]


def test_full_feature_adds_enabled_options(capsys):
    Director().make_full_feature(CarBuilder(2, Engine.V12, trip_computer=False, gps=True))
    assert capsys.readouterr().out.splitlines() == [
        "Assembling 2 seats",
        "Assembling engine type V12",
        "Assembling GPS",
    ]


def test_get_result_empties_builder(capsys):
    builder = CarBuilder(4, Engine.V6)
    car = builder.get_result()
    assert car.get_seats() == 4
    assert car.get_engine() is Engine.V6
    assert not car.has_gps()
    assert builder.get_result() is None

    Director().make_full_feature(builder)
    assert capsys.readouterr().out == ""


def test_reset_starts_a_new_car():
    builder = CarBuilder(4, Engine.V6)
    first = builder.get_result()
    builder.reset()
    second = builder.get_result()
    assert second is not None
    assert second is not first


def test_seat_count_must_be_positive():
    with pytest.raises(ValueError):
        CarBuilder(0, Engine.V4)


def test_builder_is_abstract():
    with pytest.raises(TypeError):
        Builder()


def test_main(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "Assembling 5 seats",
        "Assembling engine type V4",
        "",
        "Assembling 5 seats",
        "Assembling engine type V4",
        "Assembling trip computer",
        "Built: Car(seats=5, engine=V4, trip_computer=True, gps=False)",
    ]
