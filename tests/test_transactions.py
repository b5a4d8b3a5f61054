"""Transaction reader tests."""

import pandas as pd
import pytest

from apriori_rules import InputUnavailableError, read_transactions
from apriori_rules.preprocessing.transactions import (
    as_transaction_data,
    transactions_from_dataframe,
    transactions_from_records,
)


def test_read_basket_file(basket_file) -> None:
    data = read_transactions(basket_file)
    assert len(data.transactions) == 4
    assert data.items.all_labels() == ["A", "B", "C"]
    assert data.labels_of(data.transactions[2]) == ["A", "B", "C"]


def test_read_strips_labels_and_skips_blank_lines(tmp_path) -> None:
    path = tmp_path / "baskets.txt"
    path.write_text("milk, bread\n\n bread,eggs,\n", encoding="utf-8")
    data = read_transactions(path)
    assert len(data.transactions) == 2
    assert data.items.all_labels() == ["milk", "bread", "eggs"]
    assert data.labels_of(data.transactions[1]) == ["bread", "eggs"]


def test_read_custom_delimiter(tmp_path) -> None:
    path = tmp_path / "baskets.txt"
    path.write_text("a;b\nb;c\n", encoding="utf-8")
    data = read_transactions(path, delimiter=';')
    assert data.items.count() == 3


def test_missing_file_raises_input_unavailable(tmp_path) -> None:
    with pytest.raises(InputUnavailableError) as excinfo:
        read_transactions(tmp_path / "missing.txt")
    assert isinstance(excinfo.value, OSError)
    assert "missing.txt" in str(excinfo.value)


def test_undecodable_file_raises_input_unavailable(tmp_path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"A,\xff\xfeB\n")
    with pytest.raises(InputUnavailableError) as excinfo:
        read_transactions(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_read_with_explicit_encoding(tmp_path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"A,\xff\xfeB\n")
    data = read_transactions(path, encoding='latin-1')
    assert data.items.all_labels() == ["A", "\xff\xfeB"]


def test_positions_in_first_seen_order() -> None:
    data = transactions_from_records([["c", "a"], ["b", "a"]])
    assert [data.items.position_of(x) for x in ["c", "a", "b"]] == [0, 1, 2]


def test_repeated_label_in_transaction() -> None:
    data = transactions_from_records([["a", "a", "b"]])
    assert data.labels_of(data.transactions[0]) == ["a", "b"]


def test_dataframe_rows_become_feature_value_items() -> None:
    df = pd.DataFrame({'a': ['x', None], 'b': [1, 2]})
    data = transactions_from_dataframe(df)
    assert data.labels_of(data.transactions[0]) == ["a__x", "b__1"]
    assert data.labels_of(data.transactions[1]) == ["b__2"]


def test_as_transaction_data_passthrough(basket_data) -> None:
    assert as_transaction_data(basket_data) is basket_data
    with pytest.raises(TypeError):
        as_transaction_data("transactions.txt")
