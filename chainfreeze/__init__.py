"""Turn EVM node responses into per-dataset column tables.

The data types are in ``chainfreeze.evm``. Schemas and row storage are in
``chainfreeze.columns``. Each dataset has its own module.
"""

__version__ = "0.1.0"