from ledger_service.notifications import LoggingNotificationService
from ledger_service.service import AccountsService
from ledger_service.store import InMemoryAccountsRepository

# One store per process; state is lost on restart.
_accounts_service = AccountsService(InMemoryAccountsRepository(), LoggingNotificationService())


def get_accounts_service() -> AccountsService:
    """
    AccountsService dependency for FastAPI routes.
    """
    return _accounts_service
