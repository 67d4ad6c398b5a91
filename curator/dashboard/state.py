from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from .models import DashboardState

logger = logging.getLogger(__name__)

SESSION_KEY = "dashboard_state"


def load_state(session: MutableMapping[str, Any]) -> DashboardState:
    """Return the session's dashboard state, or defaults when absent or unreadable."""
    raw_state = session.get(SESSION_KEY)
    if not raw_state:
        return DashboardState()
    try:
        return DashboardState.model_validate(raw_state)
    except ValidationError:
        logger.warning("Discarding unreadable dashboard state from session", exc_info=True)
        return DashboardState()


def save_state(session: MutableMapping[str, Any], state: DashboardState) -> None:
    session[SESSION_KEY] = state.model_dump(mode="json")


def reset_state(session: MutableMapping[str, Any]) -> DashboardState:
    state = DashboardState()
    save_state(session, state)
    return state
