"""Track the active Java resource and generated artifacts between commands."""

import os
import json
import logging
from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import asdict

from arquillian_scaffold.models.data_models import JavaResource, ScaffoldState

logger = logging.getLogger(__name__)


class ScaffoldStateTracker:
    """Persist the resource the last command picked up, plus a short history."""

    def __init__(self, state_file: str = ".arquillian_state.json", max_history: int = 50):
        self.state_file = state_file
        self.max_history = max_history
        self.state = self._load_state() if os.path.exists(self.state_file) else self._empty_state()

    @staticmethod
    def _empty_state() -> ScaffoldState:
        return ScaffoldState(timestamp=datetime.now().isoformat())

    def _load_state(self) -> ScaffoldState:
        """Load previous state."""
        try:
            with open(self.state_file, 'r') as f:
                data = json.load(f)
                return ScaffoldState(**data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load state: {e}")
        return self._empty_state()

    def save_state(self):
        """Save current state to file."""
        try:
            self.state.timestamp = datetime.now().isoformat()
            with open(self.state_file, 'w') as f:
                json.dump(asdict(self.state), f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save state: {e}")

    def pick_up(self, resource: JavaResource):
        """Make ``resource`` the active resource for later commands."""
        self.state.active_resource = {
            "qualified_name": resource.qualified_name,
            "path": str(resource.path),
        }
        logger.debug(f"Active resource is now {resource.qualified_name}")
        self.save_state()

    @property
    def active_qualified_name(self) -> Optional[str]:
        if not self.state.active_resource:
            return None
        return self.state.active_resource.get("qualified_name")

    def record(self, action: str, target: str, **details):
        """Append an entry to the bounded history."""
        entry = {"timestamp": datetime.now().isoformat(), "action": action, "target": target}
        entry.update(details)
        self.state.history.append(entry)
        if len(self.state.history) > self.max_history:
            self.state.history = self.state.history[-self.max_history:]
        self.save_state()

    def recent(self, limit: int = 10) -> List[Dict]:
        return list(self.state.history[-limit:])
