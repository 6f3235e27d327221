"""Saved Food Storage - Persistence for the saved-foods list.

This module handles all disk I/O for saved foods.
All I/O is contained here; list logic is in the core module.
"""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from ..core.constants import SAVED_FOODS_STORAGE_KEY
from ..core.models import SavedFood
from ..core.saved_foods import add_saved_food, find_saved_food, remove_saved_food


logger = logging.getLogger(__name__)

_SAVED_FOODS = TypeAdapter(list[SavedFood])


def default_storage_path() -> Path:
    """Storage file from MACROCOOK_DATA_FILE, or ~/.macrocook/saved_foods.json."""
    configured = os.environ.get("MACROCOOK_DATA_FILE")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".macrocook" / "saved_foods.json"


@dataclass
class StorageConfig:
    """Configuration for saved-food storage.

    Attributes:
        path: JSON document holding the key-value slots (None for default)
        key: Slot name for the saved-foods list
    """

    path: Path | None = None
    key: str = SAVED_FOODS_STORAGE_KEY


class SavedFoodStore:
    """Key-value store for saved foods, backed by a JSON document.

    Document structure:
        {
            "macro-calculator-saved-foods": [
                {"id", "name", "cookingRatio", "dateAdded"}, ...
            ]
        }

    Other keys in the document are preserved on write.
    """

    def __init__(self, config: StorageConfig | None = None) -> None:
        """Initialize the store.

        Args:
            config: Storage configuration
        """
        self.config = config or StorageConfig()
        self.path = self.config.path or default_storage_path()

    def _read_document(self) -> dict[str, Any]:
        """Load the whole document; a missing file is an empty document."""
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return data

    def _write_document(self, data: dict[str, Any]) -> None:
        """Replace the document atomically via a sibling temp file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".saved_foods-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    # ==================== Read Operations ====================

    def _load_foods(self) -> list[SavedFood]:
        """Parse the saved-foods slot, raising if any entry is invalid."""
        document = self._read_document()
        return _SAVED_FOODS.validate_python(document.get(self.config.key, []))

    def list_foods(self) -> list[SavedFood]:
        """Fetch every saved food.

        Returns:
            Saved foods in insertion order (empty if none or unreadable)
        """
        logger.debug("Reading saved foods from %s", self.path)
        try:
            return self._load_foods()
        except (OSError, ValueError) as e:
            logger.error("Failed to read saved foods: %s", str(e))
            return []

    def get_by_name(self, name: str) -> SavedFood | None:
        """Fetch a saved food by exact name.

        Args:
            name: Name of the food

        Returns:
            SavedFood if found, None otherwise
        """
        return find_saved_food(self.list_foods(), name)

    # ==================== Write Operations ====================

    def _save_list(self, foods: list[SavedFood]) -> bool:
        try:
            document = self._read_document() if self.path.exists() else {}
            document[self.config.key] = _SAVED_FOODS.dump_python(foods, mode="json", by_alias=True)
            self._write_document(document)
            return True
        except (OSError, ValueError) as e:
            logger.error("Failed to write saved foods: %s", str(e))
            return False

    def _current_foods(self) -> list[SavedFood] | None:
        """Strict read before a write; None if the stored list cannot be trusted."""
        try:
            return self._load_foods()
        except (OSError, ValueError) as e:
            logger.error("Refusing to rewrite unreadable saved foods: %s", str(e))
            return None

    def add(self, food: SavedFood) -> bool:
        """Save a food unless the name is already taken.

        Args:
            food: The saved food to add

        Returns:
            True if the food was written, False if it was a duplicate or failed
        """
        foods = self._current_foods()
        if foods is None:
            return False
        updated = add_saved_food(foods, food)
        if len(updated) == len(foods):
            logger.warning("Saved food already exists: %s", food.name)
            return False

        logger.info("Saving food: %s (ratio %.4f)", food.name, food.cooking_ratio)
        return self._save_list(updated)

    def delete(self, food_id: str) -> bool:
        """Delete a saved food.

        Args:
            food_id: ID of the saved food

        Returns:
            True if a food was removed and the list written
        """
        foods = self._current_foods()
        if foods is None:
            return False
        updated = remove_saved_food(foods, food_id)
        if len(updated) == len(foods):
            logger.warning("Saved food not found: %s", food_id)
            return False

        logger.info("Deleting saved food: %s", food_id)
        return self._save_list(updated)
