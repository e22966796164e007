"""Pure helpers for applying consumable items to combatants."""
from __future__ import annotations

from dataclasses import dataclass

from battlecore.domain.entities import Combatant, Item


@dataclass(slots=True)
class ItemEffectResult:
    """Summary of what a consumable did."""

    item_name: str
    hp_delta: int = 0

    @property
    def had_effect(self) -> bool:
        return self.hp_delta != 0


def use_consumable(combatant: Combatant, item: Item) -> ItemEffectResult | None:
    """Apply a heal consumable; returns None for items that cannot be used in a fight."""
    if not item.is_heal_consumable:
        return None
    assert item.consumable is not None
    healed = combatant.health.restore(item.consumable.value)
    return ItemEffectResult(item_name=item.name, hp_delta=healed)


def use_first_heal_item(combatant: Combatant) -> ItemEffectResult | None:
    """Consume the first heal item in the inventory, if any."""
    index = combatant.first_heal_item_index()
    if index is None:
        return None
    item = combatant.inventory.pop(index)
    return use_consumable(combatant, item)
