"""
Timeline Interfaces

Protocol definitions for the engine's integration points.
The engine never fetches or persists anything itself; the application
injects implementations of these protocols.
"""

from typing import Protocol, Dict, Any, runtime_checkable


@runtime_checkable
class RecordSourceInterface(Protocol):
    """
    Protocol for dataset providers (remote fetch, bundled file, fixtures).
    """

    def fetch(self) -> Dict[str, Any]:
        """
        Get the whole dataset.

        Returns:
            Dictionary with keys:
            - 'events': list of event dicts
            - 'media': list of media dicts (optional)
            - 'idioms': list of idiom dicts (optional)
            - 'series': list of podcast series dicts (optional)
            - 'podcast': podcast info dict (optional)
        """
        ...


@runtime_checkable
class PreferencesRepository(Protocol):
    """
    Protocol for key/value preference storage used by settings managers.
    """

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...
