from typing import Any, Iterable

from pydantic import BaseModel


def collect_changes(
    data: BaseModel, allowed: Iterable[str] | None = None
) -> dict[str, Any]:
    """
    Collect only the fields the client actually sent.

    Fields missing from the payload are left out, explicit nulls are kept.
    With `allowed`, anything outside that set of columns is dropped too.
    """
    changes = data.model_dump(exclude_unset=True)
    if allowed is not None:
        allowed = set(allowed)
        changes = {k: v for k, v in changes.items() if k in allowed}
    return changes
