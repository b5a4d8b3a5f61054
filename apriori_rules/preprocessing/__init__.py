from .transactions import (
    read_transactions,
    transactions_from_records,
    transactions_from_dataframe,
    as_transaction_data,
    DEFAULT_TRANSACTIONS_PATH
)

__all__ = [
    'read_transactions',
    'transactions_from_records',
    'transactions_from_dataframe',
    'as_transaction_data',
    'DEFAULT_TRANSACTIONS_PATH'
]
