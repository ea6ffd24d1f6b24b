from .service import ObligationService

__all__ = ["ObligationService"]
