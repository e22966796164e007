"""Equipment transfer and stat aggregation helpers."""
from __future__ import annotations

from typing import Dict, Iterable, List

from battlecore.domain.entities import Item, StatModifier


def equip_best_item(item: Item, equipment: Dict[int, Item], inventory: List[Item]) -> bool:
    """
    Equip `item` if its slot is empty or it has higher combat power.

    Consumables and scrolls always go to the inventory; a replaced piece of
    gear is moved to the inventory. Lower-power gear is discarded.
    Returns True when the item ended up equipped.
    """

    if not item.is_equipment:
        inventory.append(item)
        return False
    current = equipment.get(item.slot)
    if current is None:
        equipment[item.slot] = item
        return True
    if item.cp > current.cp:
        equipment[item.slot] = item
        inventory.append(current)
        return True
    return False


def transfer_equipment(items: Iterable[Item], equipment: Dict[int, Item], inventory: List[Item]) -> List[Item]:
    """Offer every item to `equip_best_item` and return the ones equipped."""
    equipped: List[Item] = []
    for item in list(items):
        if equip_best_item(item, equipment, inventory):
            equipped.append(item)
    return equipped


def calculate_item_mods(equipment: Dict[int, Item]) -> StatModifier:
    total = StatModifier()
    for item in equipment.values():
        total.attack += item.stat_mod.attack
        total.defense += item.stat_mod.defense
        total.max_health += item.stat_mod.max_health
    return total
