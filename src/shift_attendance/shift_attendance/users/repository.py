from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Worker


class UserRepository(Protocol):
    """Repository interface for Worker accounts.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        worker_id: str,
        password_hash: str,
        role: Role,
        job: Optional[str],
        email: Optional[str],
        shift_id: Optional[int],
    ) -> None:
        raise NotImplementedError

    def delete_by_id(self, worker_id: str) -> int:
        """Return the number of deleted rows."""

        raise NotImplementedError

    def list_workers(self) -> Sequence[Worker]:
        raise NotImplementedError

    def list_workers_on_shift(self, shift_name: str) -> Sequence[Worker]:
        """Role=worker accounts assigned to the named shift."""

        raise NotImplementedError
