from motash.infrastructure.persistence.state_store import JsonStateStore, StateFileError

__all__ = ["JsonStateStore", "StateFileError"]
