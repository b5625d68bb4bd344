"""Row-level access policies.

Every table carries an allow-list keyed by action. A missing entry means the
action is denied to everyone except privileged callers (maintenance tooling).
Rules are evaluated against an explicit :class:`Caller`; nothing here reads
ambient request state.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from schoolboard.core.errors import AuthorizationFailure
from schoolboard.models import Comment, Post, Profile, School, UserSchool, Vote

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Row-level operations subject to policy checks."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Caller:
    """Identity on whose behalf an operation runs."""

    user_id: uuid.UUID | None = None
    session_id: uuid.UUID | None = None
    privileged: bool = False

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> Caller:
        return cls()

    @classmethod
    def service(cls) -> Caller:
        """Caller that bypasses policies, used by maintenance commands."""
        return cls(privileged=True)


@dataclass(frozen=True)
class Rule:
    """A single allow rule.

    ``owner_column`` names the attribute that must equal the caller's id;
    ``None`` means the rule is open to anyone, signed in or not.
    """

    owner_column: str | None = None

    def allows(self, caller: Caller, values: Mapping[str, Any]) -> bool:
        if self.owner_column is None:
            return True
        if not caller.authenticated:
            return False
        return values.get(self.owner_column) == caller.user_id


OPEN = Rule()


def owner(column: str) -> Rule:
    return Rule(owner_column=column)


POLICIES: dict[type, dict[Action, Rule]] = {
    School: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("created_by"),
    },
    Profile: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("id"),
        Action.UPDATE: owner("id"),
    },
    UserSchool: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("user_id"),
        Action.UPDATE: owner("user_id"),
        Action.DELETE: owner("user_id"),
    },
    Post: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("user_id"),
        Action.UPDATE: owner("user_id"),
        Action.DELETE: owner("user_id"),
    },
    Comment: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("user_id"),
        Action.UPDATE: owner("user_id"),
        Action.DELETE: owner("user_id"),
    },
    Vote: {
        Action.SELECT: OPEN,
        Action.INSERT: owner("user_id"),
        Action.UPDATE: owner("user_id"),
        Action.DELETE: owner("user_id"),
    },
}


def row_values(row: Any) -> dict[str, Any]:
    """Return the mapped column values of an ORM instance as a dict."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def is_allowed(
    caller: Caller,
    action: Action,
    model: type,
    values: Mapping[str, Any],
) -> bool:
    """Evaluate the policy table without raising."""
    if caller.privileged:
        return True
    rule = POLICIES.get(model, {}).get(action)
    if rule is None:
        return False
    return rule.allows(caller, values)


def authorize(
    caller: Caller,
    action: Action,
    row: Any,
    changes: Mapping[str, Any] | None = None,
) -> None:
    """Raise :class:`AuthorizationFailure` unless the caller may act on ``row``.

    For updates the rule must hold for the existing row and for the row as it
    would look after ``changes`` are applied, so ownership cannot be handed
    to somebody else.
    """
    model = type(row)
    current = row_values(row)
    allowed = is_allowed(caller, action, model, current)
    if allowed and action is Action.UPDATE and changes:
        allowed = is_allowed(caller, action, model, {**current, **changes})

    if not allowed:
        logger.warning(
            "Policy rejected %s on %s by %s",
            action.value,
            model.__tablename__,
            caller.user_id or "anonymous",
        )
        raise AuthorizationFailure()
