import pytest

from apriori_rules.preprocessing.transactions import transactions_from_records

BASKETS = [
    ["A", "B"],
    ["A", "C"],
    ["A", "B", "C"],
    ["B", "C"],
]


@pytest.fixture
def basket_data():
    return transactions_from_records(BASKETS)


@pytest.fixture
def basket_file(tmp_path):
    path = tmp_path / "transactions.txt"
    path.write_text("\n".join(",".join(b) for b in BASKETS) + "\n", encoding="utf-8")
    return path
