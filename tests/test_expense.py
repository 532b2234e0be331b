import pytest

from despesas.expense import (
    DESCRIPTION_SIZE,
    RECORD_SIZE,
    Expense,
    is_valid_date,
)


def test_record_size_matches_layout():
    data = Expense("Luz", 80.0, 3, 4, 2023).to_bytes()
    assert len(data) == 116
    assert len(data) == RECORD_SIZE


def test_round_trip():
    expense = Expense("Aluguel", 12.5, 10, 1, 2024)
    data = expense.to_bytes()
    assert len(data) == RECORD_SIZE
    assert Expense.from_bytes(data) == expense


def test_round_trip_non_ascii():
    expense = Expense("Farmácia ção", 3.25, 5, 6, 2000)
    assert Expense.from_bytes(expense.to_bytes()) == expense


def test_description_is_truncated():
    expense = Expense("x" * 300, 1.0, 1, 1, 2000)
    restored = Expense.from_bytes(expense.to_bytes())
    assert restored.description == "x" * (DESCRIPTION_SIZE - 1)


def test_truncation_keeps_valid_utf8():
    expense = Expense("é" * 80, 1.0, 1, 1, 2000)
    restored = Expense.from_bytes(expense.to_bytes())
    assert set(restored.description) == {"é"}
    assert len(restored.description.encode("utf-8")) <= DESCRIPTION_SIZE - 1


def test_value_stored_as_single_precision():
    expense = Expense("Mercado", 19.99, 1, 1, 2020)
    restored = Expense.from_bytes(expense.to_bytes())
    assert restored.value == pytest.approx(19.99, abs=1e-5)


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Expense.from_bytes(b"\0" * (RECORD_SIZE - 1))


def test_to_bytes_rejects_out_of_range_int():
    with pytest.raises(ValueError):
        Expense("a", 1.0, 2**40, 1, 2000).to_bytes()


@pytest.mark.parametrize(
    "day, month, year, expected",
    [
        (1, 1, 1925, True),
        (31, 12, 2125, True),
        (0, 1, 2000, False),
        (32, 1, 2000, False),
        (1, 0, 2000, False),
        (1, 13, 2000, False),
        (1, 1, 1924, False),
        (1, 1, 2126, False),
    ],
)
def test_is_valid_date(day, month, year, expected):
    assert is_valid_date(day, month, year) is expected