from app_utils.storage import CUSTOM_GROCERY_KEY, PURCHASED_KEY, WEIGHT_KEY
from features.grocery import (
    add_custom_item, clear_grocery, combined_list, load_custom_items,
    load_purchased, toggle, toggle_purchased,
)

PLAN_ROWS = [
    {"Item": "Eggs", "Weekly Qty (approx)": "18"},
    {"Item": "Rice", "Weekly Qty (approx)": "2 lb"},
]


def test_toggle_twice_restores_value():
    start = {"Eggs": True}
    once = toggle(start, "Eggs")
    assert once["Eggs"] is False
    assert toggle(once, "Eggs") == start
    assert start == {"Eggs": True}


def test_toggle_absent_key_becomes_true():
    assert toggle({}, "Rice") == {"Rice": True}


def test_toggle_purchased_persists(store):
    assert toggle_purchased(store, "Eggs") is True
    assert toggle_purchased(store, "Eggs") is False
    assert load_purchased(store) == {"Eggs": False}


def test_custom_items_append_without_dedup(store):
    add_custom_item(store, "Oats", "1 bag")
    add_custom_item(store, "Oats", "1 bag")
    assert store.get(CUSTOM_GROCERY_KEY) == [
        {"Item": "Oats", "Weekly Qty (approx)": "1 bag"},
        {"Item": "Oats", "Weekly Qty (approx)": "1 bag"},
    ]
    assert add_custom_item(store, "  ", "1") is False
    assert add_custom_item(store, "Salt", "") is False
    assert len(load_custom_items(store)) == 2


def test_combined_list_order_and_shared_flag():
    custom = [{"Item": "Oats", "Weekly Qty (approx)": "1 bag"},
              {"Item": "Eggs", "Weekly Qty (approx)": "6"}]
    rows = combined_list(PLAN_ROWS, custom, {"Eggs": True})
    assert [r["Item"] for r in rows] == ["Eggs", "Rice", "Oats", "Eggs"]
    # same name, same purchase flag
    assert [r["purchased"] for r in rows] == [True, False, False, True]


def test_clear_grocery_removes_both_keys_only(store):
    store.set(WEIGHT_KEY, [{"date": "2024-01-01", "weight": 180}])
    toggle_purchased(store, "Eggs")
    add_custom_item(store, "Oats", "1 bag")

    clear_grocery(store)
    assert PURCHASED_KEY not in store
    assert CUSTOM_GROCERY_KEY not in store
    assert store.get(WEIGHT_KEY) == [{"date": "2024-01-01", "weight": 180}]
