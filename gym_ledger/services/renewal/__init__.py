from gym_ledger.services.renewal.renewal_service import RenewalService

__all__ = ["RenewalService"]
