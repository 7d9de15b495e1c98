import copy
import json
import logging
import os

from sqlalchemy import create_engine, text

from app_utils.config import DB_PATH

log = logging.getLogger(__name__)

# Storage keys. Names and JSON shapes are the persisted format; do not rename.
WEIGHT_KEY = "weightEntries"
FOOD_KEY = "foodEntries"
WORKOUT_KEY = "workoutLogs"
PURCHASED_KEY = "purchasedItems"
CUSTOM_GROCERY_KEY = "customGrocery"
SCHEDULER_KEY = "schedulerProgress"

ALL_KEYS = [WEIGHT_KEY, FOOD_KEY, WORKOUT_KEY, PURCHASED_KEY, CUSTOM_GROCERY_KEY, SCHEDULER_KEY]


class KeyValueStore:
    """
    Synchronous string-keyed store holding one JSON document per key.
    Backed by a single SQLite table so a whole value is replaced in one statement.
    """

    def __init__(self, db_path=DB_PATH):
        self.db_path = db_path
        folder = os.path.dirname(db_path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        self.init_db()

    def init_db(self):
        with self.engine.begin() as conn:
            conn.execute(text("""
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """))

    def get(self, key, default=None):
        with self.engine.connect() as conn:
            row = conn.execute(text("SELECT value FROM kv WHERE key = :key"), {"key": key}).fetchone()
        if row is None:
            # fresh copy so callers can mutate the default freely
            return copy.deepcopy(default)
        return json.loads(row[0])

    def set(self, key, value):
        payload = json.dumps(value)
        with self.engine.begin() as conn:
            conn.execute(text("""
                INSERT INTO kv(key, value) VALUES(:key, :value)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """), {"key": key, "value": payload})
        log.debug("saved %s (%d bytes)", key, len(payload))

    def delete(self, key):
        with self.engine.begin() as conn:
            conn.execute(text("DELETE FROM kv WHERE key = :key"), {"key": key})
        log.info("cleared %s", key)

    def keys(self):
        with self.engine.connect() as conn:
            return [r[0] for r in conn.execute(text("SELECT key FROM kv ORDER BY key")).fetchall()]

    def __contains__(self, key):
        with self.engine.connect() as conn:
            row = conn.execute(text("SELECT 1 FROM kv WHERE key = :key"), {"key": key}).fetchone()
        return row is not None


def load_list(store, key):
    value = store.get(key, [])
    return value if isinstance(value, list) else []


def load_dict(store, key):
    value = store.get(key, {})
    return value if isinstance(value, dict) else {}


# collection -> keys removed by its bulk clear
CLEAR_KEYS = {
    "weight": [WEIGHT_KEY],
    "food": [FOOD_KEY],
    "workouts": [WORKOUT_KEY],
    "grocery": [PURCHASED_KEY, CUSTOM_GROCERY_KEY],
    "scheduler": [SCHEDULER_KEY],
}


def clear_collection(store, name):
    for key in CLEAR_KEYS[name]:
        store.delete(key)
