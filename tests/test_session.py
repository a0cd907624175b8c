import pytest

from kalkulator.core import Calculator, format_number, from_decimal
from kalkulator.session import CalculatorSession, DivisionByZeroError


def _type(session, text):
    for char in text:
        if char == ".":
            session.press_point()
        else:
            session.press_digit(char)


@pytest.fixture
def session():
    return CalculatorSession()


def test_digits_and_point_append(session):
    _type(session, "12.5")
    assert session.display == "12.5"


def test_second_point_is_ignored(session):
    _type(session, "1.2")
    session.press_point()
    assert session.display.count(".") == 1


def test_press_digit_accepts_int(session):
    session.press_digit(7)
    assert session.display == "7"


@pytest.mark.parametrize("bad", ["a", "12", "", 10, "-"])
def test_press_digit_rejects_non_digits(session, bad):
    with pytest.raises(ValueError):
        session.press_digit(bad)


def test_backspace(session):
    _type(session, "12")
    assert session.backspace() == "1"
    session.backspace()
    assert session.backspace() == ""


def test_toggle_sign_round_trip(session):
    _type(session, "12")
    assert session.toggle_sign() == "-12"
    assert session.toggle_sign() == "12"


def test_toggle_sign_on_empty_display(session):
    assert session.toggle_sign() == "-"


def test_operator_on_empty_display_does_nothing(session):
    session.press_operator("+")
    assert session.operation == ""
    assert session.first_number == ""


def test_operator_stores_first_operand(session):
    _type(session, "12")
    session.press_operator("+")
    assert session.first_number == "12"
    assert session.operation == "+"
    assert session.display == ""


def test_operator_without_entry_replaces_operation(session):
    _type(session, "12")
    session.press_operator("+")
    session.press_operator("*")
    assert session.operation == "*"
    assert session.first_number == "12"


def test_unknown_operator_raises(session):
    with pytest.raises(ValueError):
        session.press_operator("^")


def test_equals_adds(session):
    _type(session, "12")
    session.press_operator("+")
    _type(session, "3")
    result = session.equals()
    assert float(result) == 12 + 3
    assert session.memory == result
    assert session.operation == ""
    assert session.first_number == ""
    assert session.display == ""


def test_remainder_matches_calculator(session):
    _type(session, "7")
    session.press_operator("%")
    _type(session, "3")
    session.equals()
    assert session.memory == format_number(Calculator(a=7, b=3).remainder())


def test_chained_operator_computes_pending(session):
    _type(session, "2")
    session.press_operator("+")
    _type(session, "3")
    session.press_operator("*")
    assert session.first_number == session.memory
    assert float(session.memory) == 2 + 3
    assert session.operation == "*"
    _type(session, "4")
    session.equals()
    assert float(session.memory) == (2 + 3) * 4


def test_large_result_uses_short_format(session):
    _type(session, "1000000")
    session.press_operator("*")
    _type(session, "1")
    assert session.equals() == "1e+06"


@pytest.mark.parametrize("operator", ["/", "%"])
def test_division_by_zero_on_equals(session, operator):
    _type(session, "5")
    session.press_operator(operator)
    _type(session, "0")
    with pytest.raises(DivisionByZeroError, match="przez 0"):
        session.equals()
    assert session.display == ""
    assert session.operation == operator
    assert session.memory == ""


def test_division_by_zero_on_chained_operator(session):
    _type(session, "5")
    session.press_operator("/")
    _type(session, "0.0")
    with pytest.raises(ZeroDivisionError):
        session.press_operator("+")
    assert session.operation == "/"
    assert session.display == ""


def test_adding_zero_is_allowed(session):
    _type(session, "5")
    session.press_operator("+")
    _type(session, "0")
    assert float(session.equals()) == 5


def test_equals_with_empty_display_does_nothing(session):
    _type(session, "5")
    session.press_operator("+")
    session.equals()
    assert session.operation == "+"
    assert session.memory == ""


def test_equals_without_operation_keeps_previous_result(session):
    _type(session, "5")
    assert session.equals() == "0"
    assert session.display == ""


def test_store_and_recall_memory(session):
    _type(session, "42")
    assert session.store_memory() == "42"
    assert session.display == ""
    assert session.recall_memory() == "42"


def test_store_memory_blocked_by_pending_operation(session):
    _type(session, "4")
    session.press_operator("+")
    _type(session, "2")
    session.store_memory()
    assert session.memory == ""
    assert session.display == "2"


def test_recall_empty_memory_keeps_display(session):
    _type(session, "9")
    assert session.recall_memory() == "9"


def test_clear_memory(session):
    _type(session, "42")
    session.store_memory()
    session.clear_memory()
    assert session.memory == ""


def test_clear_display_keeps_memory(session):
    _type(session, "8")
    session.store_memory()
    _type(session, "3")
    session.press_operator("-")
    _type(session, "1")
    session.clear_display()
    assert (session.display, session.operation, session.first_number) == ("", "", "")
    assert session.memory == "8"


def test_memory_to_converter_drops_sign(session):
    session.memory = "-10"
    fields = session.memory_to_converter()
    assert fields[10] == "10"
    assert fields[2] == from_decimal(2, "10")
    assert session.converter[8] == from_decimal(8, "10")


def test_memory_to_converter_with_empty_memory(session):
    fields = session.memory_to_converter()
    assert all(value == "" for value in fields.values())