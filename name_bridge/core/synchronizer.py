"""Identity synchronizer: keeps an object's identifier and label in step.

Hosts expose two independently settable name fields: a strict, scope-unique
identifier and a free-form label shown to users. `IdentitySynchronizer` is the
only writer of both. After a successful rename the label always reads exactly
like the committed identifier, including any adjustment the host applied.

Outcomes:
- NoOp: the request sanitizes to nothing or to the current identifier.
- Refused: the host's atomic rename declines the candidate.
Both return the current identifier unchanged and never raise. Passing a
missing object or scope is a caller bug and raises ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .config import NamingConfig
from .resolver import find_free_identifier
from .sanitize import prepare_candidate


class NamingHost(Protocol):
    """Host capabilities consumed by the synchronizer."""

    def get_identifier(self, obj: Any) -> str:
        ...

    def get_label(self, obj: Any) -> str:
        ...

    def set_label(self, obj: Any, text: str) -> None:
        ...

    def exists(self, identifier: str, scope: Any) -> bool:
        ...

    def try_commit_identifier(self, obj: Any, candidate: str) -> Optional[str]:
        """Atomically rename obj; return the final identifier or None if refused."""
        ...


@dataclass(frozen=True)
class SyncedIdentity:
    """Snapshot of an object's identifier and label."""

    identifier: str
    label: str

    @property
    def is_synced(self) -> bool:
        return self.label == self.identifier


class _RetryLookup:
    # The object being renamed does not collide with its own identifier;
    # names the host already refused count as taken.
    def __init__(self, host: NamingHost, own_identifier: str):
        self._host = host
        self._own = own_identifier
        self.refused: set[str] = set()

    def exists(self, identifier: str, scope: Any) -> bool:
        if identifier == self._own:
            return False
        if identifier in self.refused:
            return True
        return self._host.exists(identifier, scope)


class IdentitySynchronizer:
    """Rename and name-reservation entry points used by command handlers."""

    def __init__(self, host: NamingHost, config: NamingConfig | None = None):
        if host is None:
            raise ValueError("A naming host is required")
        self.host = host
        self.config = config or NamingConfig()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def identity_of(self, obj: Any) -> SyncedIdentity:
        self._require_object(obj)
        return SyncedIdentity(
            identifier=self.host.get_identifier(obj),
            label=self.host.get_label(obj),
        )

    def reserve_free_identifier(self, base_name: str, scope: Any) -> str:
        """Return a free identifier based on base_name without mutating anything.

        Empty or reserved names are replaced by the configured fallback first.
        """
        self._require_scope(scope)
        candidate = prepare_candidate(base_name, self.config) or self.config.fallback_name
        return find_free_identifier(
            candidate,
            scope,
            self.host,
            separator=self.config.suffix_separator,
            debug=self.config.debug,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def rename(self, obj: Any, requested_name: str, scope: Any) -> str:
        """Rename obj to requested_name and sync its label.

        Returns the committed identifier, or the current one on NoOp/Refused.
        """
        self._require_object(obj)
        self._require_scope(scope)
        current = self.host.get_identifier(obj)

        candidate = prepare_candidate(requested_name, self.config)
        if not candidate:
            self._log(f"'{requested_name}' has no legal characters; keeping '{current}'")
            return current
        if candidate == current:
            return current

        committed = self._commit(obj, candidate)
        return committed if committed is not None else current

    def rename_to_free_identifier(self, obj: Any, requested_name: str, scope: Any) -> str:
        """Rename obj to the first free variant of requested_name.

        The free-name search is read-only, so a concurrent rename may take the
        name before the commit. A refused commit re-runs the search without
        the refused name, up to `config.max_commit_attempts` times.
        """
        self._require_object(obj)
        self._require_scope(scope)
        current = self.host.get_identifier(obj)

        candidate = prepare_candidate(requested_name, self.config)
        if not candidate:
            self._log(f"'{requested_name}' has no legal characters; keeping '{current}'")
            return current

        lookup = _RetryLookup(self.host, current)
        for attempt in range(1, self.config.max_commit_attempts + 1):
            free = find_free_identifier(
                candidate,
                scope,
                lookup,
                separator=self.config.suffix_separator,
                debug=self.config.debug,
            )
            if free == current:
                return current
            committed = self._commit(obj, free)
            if committed is not None:
                return committed
            lookup.refused.add(free)
            self._log(f"Commit of '{free}' refused (attempt {attempt}/{self.config.max_commit_attempts})")
        return current

    def sync_label(self, obj: Any) -> str:
        """Set obj's label to its current identifier and return the identifier."""
        self._require_object(obj)
        identifier = self.host.get_identifier(obj)
        if self.host.get_label(obj) != identifier:
            self.host.set_label(obj, identifier)
        return identifier

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _commit(self, obj: Any, candidate: str) -> Optional[str]:
        committed = self.host.try_commit_identifier(obj, candidate)
        if committed is None:
            self._log(f"Host refused identifier '{candidate}'")
            return None
        if committed != candidate:
            self._log(f"Host adjusted '{candidate}' to '{committed}'")
        # The committed form is authoritative for the label.
        self.host.set_label(obj, committed)
        return committed

    def _log(self, message: str) -> None:
        if self.config.debug:
            print(f"[Name Bridge] {message}")

    @staticmethod
    def _require_object(obj: Any) -> None:
        if obj is None:
            raise ValueError("A target object is required")

    @staticmethod
    def _require_scope(scope: Any) -> None:
        if scope is None:
            raise ValueError("A naming scope is required")


__all__ = [
    "NamingHost",
    "SyncedIdentity",
    "IdentitySynchronizer",
]
