import pytest

from deskcalc.session import Session
from deskcalc.value import Success


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("2.5", 2.5),
        pytest.param(".5", 0.5),
        pytest.param("7.", 7.0),
        pytest.param("-1", -1.0),
        pytest.param("--1", 1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("(1 + 2) * 3", 9.0),
        pytest.param("1 + 2 * 3", 7.0),
        pytest.param("-2 * 3", -6.0),
        pytest.param("2 * -3", -6.0),
        pytest.param("1 - -1", 2.0),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("0.1 + 0.2", 0.1 + 0.2),
        # variables
        pytest.param("a = 1; a", 1.0),
        pytest.param("a = 1; b = 2; a + b", 3.0),
        pytest.param("a = 1; b = 2; c = a + b", 3.0),
        pytest.param("a = b = 10; a + b", 20.0),
        pytest.param("x = 5", 5.0),
        pytest.param("x = 2 * (y = 3); x + y", 9.0),
        pytest.param("n = n + 1", 1.0),
        pytest.param("q", 0.0),
        pytest.param("q + 1", 1.0),
        pytest.param("value2 = 4\nvalue2 * value2", 16.0),
        # builtin constants
        pytest.param("pi", 3.14159265359),
        pytest.param("ee", 2.71828182846),
        pytest.param("pi = 3; pi", 3.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    session = Session()
    results = session.evaluate(code)
    assert results[-1] == Success(expected_ret_val)
    assert session.error_count == 0


def test_assignment_persists_between_evaluations() -> None:
    session = Session()
    assert session.evaluate("x = 5") == [Success(5.0)]
    assert session.evaluate("x") == [Success(5.0)]
    assert session.symbols["x"] == 5.0


def test_unknown_name_is_created_on_first_reference() -> None:
    session = Session()
    assert "q" not in session.symbols
    assert session.evaluate("q * 3") == [Success(0.0)]
    assert "q" in session.symbols
    assert session.symbols["q"] == 0.0


def test_one_result_per_statement() -> None:
    session = Session()
    results = session.evaluate("1; 2\n\n;3\n")
    assert results == [Success(1.0), Success(2.0), Success(3.0)]


@pytest.mark.parametrize("code", ["", "\n", ";;;", "  \n ; \n"])
def test_empty_statements_are_skipped(code: str) -> None:
    session = Session()
    assert session.evaluate(code) == []
    assert session.error_count == 0
