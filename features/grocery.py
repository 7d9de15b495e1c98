import logging

from app_utils.storage import CUSTOM_GROCERY_KEY, PURCHASED_KEY, clear_collection, load_dict, load_list

log = logging.getLogger(__name__)

# Column names shared with the plan's grocery_list rows.
ITEM_COL = "Item"
QTY_COL = "Weekly Qty (approx)"


def load_purchased(store):
    return load_dict(store, PURCHASED_KEY)


def load_custom_items(store):
    return load_list(store, CUSTOM_GROCERY_KEY)


def toggle(purchased, item_key):
    out = dict(purchased)
    out[item_key] = not out.get(item_key, False)
    return out


def toggle_purchased(store, item_key):
    purchased = toggle(load_purchased(store), item_key)
    store.set(PURCHASED_KEY, purchased)
    log.info("%s marked %s", item_key, "purchased" if purchased[item_key] else "not purchased")
    return purchased[item_key]


def add_custom_item(store, name, quantity):
    if not name or not str(name).strip() or not quantity or not str(quantity).strip():
        log.debug("rejected custom grocery item %r / %r", name, quantity)
        return False
    items = load_custom_items(store)
    items.append({ITEM_COL: name, QTY_COL: quantity})
    store.set(CUSTOM_GROCERY_KEY, items)
    log.info("added custom grocery item %s", name)
    return True


def combined_list(plan_rows, custom_rows, purchased):
    """
    Plan rows first, then custom rows. Purchase state is keyed by item name only,
    so a custom item named like a plan item shares its flag.
    """
    out = []
    for row in list(plan_rows) + list(custom_rows):
        name = row.get(ITEM_COL)
        out.append({
            ITEM_COL: name,
            QTY_COL: row.get(QTY_COL, ""),
            "purchased": bool(purchased.get(name, False)),
        })
    return out


def clear_grocery(store):
    # purchasedItems then customGrocery; two deletes, not atomic
    clear_collection(store, "grocery")
