from .in_memory_user_directory import InMemoryUserDirectory

__all__ = ["InMemoryUserDirectory"]
