import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List

from app_utils.config import PLAN_PATH

log = logging.getLogger(__name__)

PLAN_WEEKS = range(1, 9)
DAY_NAMES = ["Push A", "Pull A", "Legs A", "Push B", "Pull B", "Legs B"]

SCHEDULER_WEEK_COL = "Week"
SCHEDULER_DAYS = [
    "Mon: Push A",
    "Tue: Pull A",
    "Wed: Legs A",
    "Thu: Push B",
    "Fri: Pull B",
    "Sat: Legs B",
    "Sun: Rest/Cardio",
]

SECTIONS = ["ppl_plan", "nutrition", "grocery_list", "scheduler"]


@dataclass(frozen=True)
class WeekTarget:
    load: str = ""
    reps: str = ""


@dataclass
class ExercisePlan:
    name: str
    sets: str = ""
    target_reps: str = ""
    tempo: str = ""
    rest: str = ""
    rir: str = ""
    cues: str = ""
    notes: str = ""
    targets: Dict[int, WeekTarget] = field(default_factory=dict)

    def target(self, week: int) -> WeekTarget:
        return self.targets.get(week, WeekTarget())


@dataclass
class WorkoutGroup:
    name: str
    exercises: List[ExercisePlan]


def _text(value):
    if value is None:
        return ""
    return str(value)


def load_plan(path=PLAN_PATH):
    """Static plan data. Missing sections come back as empty lists."""
    if not os.path.exists(path):
        log.warning("plan file %s not found, using empty plan", path)
        return {s: [] for s in SECTIONS}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return {s: data.get(s) or [] for s in SECTIONS}


def is_separator(row):
    name = row.get("Exercise")
    return not name or str(name).strip() == "0"


def to_exercise(row) -> ExercisePlan:
    targets = {}
    for week in PLAN_WEEKS:
        load = _text(row.get(f"Week {week} Load"))
        reps = _text(row.get(f"W{week} Reps"))
        if load or reps:
            targets[week] = WeekTarget(load, reps)
    return ExercisePlan(
        name=str(row["Exercise"]).strip(),
        sets=_text(row.get("Sets")),
        target_reps=_text(row.get("Reps (target range)")),
        tempo=_text(row.get("Tempo")),
        rest=_text(row.get("Rest (sec)")),
        rir=_text(row.get("RIR Target")),
        cues=_text(row.get("Key Cues (form & intent)")),
        notes=_text(row.get("Notes")),
        targets=targets,
    )


def exercise_plans(plan) -> List[ExercisePlan]:
    return [to_exercise(r) for r in plan.get("ppl_plan", []) if not is_separator(r)]


def workout_groups(plan) -> List[WorkoutGroup]:
    """Split the plan into training days at separator rows ("0" or blank exercise)."""
    buckets: Dict[int, List[ExercisePlan]] = {}
    index = 0
    for row in plan.get("ppl_plan", []):
        if is_separator(row):
            index += 1
            continue
        buckets.setdefault(index, []).append(to_exercise(row))

    groups = []
    for idx in sorted(buckets):
        name = DAY_NAMES[idx] if idx < len(DAY_NAMES) else f"Group {idx + 1}"
        groups.append(WorkoutGroup(name, buckets[idx]))
    return groups
