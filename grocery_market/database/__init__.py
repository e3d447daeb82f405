from grocery_market.database.async_db import (
    AsyncSessionLocal,
    async_engine,
    create_tables,
    dispose_engine,
    drop_tables,
    get_async_db,
)

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "create_tables",
    "drop_tables",
    "dispose_engine",
    "get_async_db",
]
