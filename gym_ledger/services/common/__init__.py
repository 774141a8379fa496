from gym_ledger.services.common.load_state import LoadState
from gym_ledger.services.common.messages import to_user_message, to_user_title

__all__ = ["LoadState", "to_user_message", "to_user_title"]
