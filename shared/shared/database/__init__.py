from shared.database.postgres import Base, get_async_session_factory

__all__ = [
    "get_async_session_factory",
    "Base",
]
