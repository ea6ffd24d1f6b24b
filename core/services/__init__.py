from .finance import FinanceService
from .obligation import ObligationService

__all__ = [
    "FinanceService",
    "ObligationService",
]
