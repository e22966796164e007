"""Items repository."""
from __future__ import annotations

from typing import Dict

from battlecore.data.repositories.base import RepositoryBase
from battlecore.domain.defs import ItemDef

VALID_ITEM_TYPES = {"consumable"}
VALID_EFFECT_TYPES = {"heal"}


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates consumable item definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            context = f"item '{raw_id}'"
            item_data = self._require_mapping(payload, context)
            self._assert_exact_fields(item_data, {"name", "type", "effect"}, context)
            effect_data = self._require_mapping(item_data["effect"], f"{context} effect")
            self._assert_exact_fields(effect_data, {"effect_type", "value"}, f"{context} effect")

            items[raw_id] = ItemDef(
                id=raw_id,
                name=self._require_str(item_data["name"], f"{context} name"),
                type=self._require_literal(item_data["type"], VALID_ITEM_TYPES, f"{context} type"),
                effect_type=self._require_literal(
                    effect_data["effect_type"], VALID_EFFECT_TYPES, f"{context} effect_type"
                ),
                value=self._require_int(effect_data["value"], f"{context} value"),
            )
        return items
