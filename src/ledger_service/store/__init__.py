from .base import AccountsRepository
from .memory import InMemoryAccountsRepository
from .models import Account

__all__ = ["Account", "AccountsRepository", "InMemoryAccountsRepository"]
