# app.py
# Run:
#   streamlit run app.py
#
# User data lives in data/tracker.db (one JSON document per storage key).
# The 8-week plan is read from data/app_data.json.

from datetime import date

import pandas as pd
import streamlit as st

from app_utils.config import DB_PATH, PLAN_PATH, setup_logging
from app_utils.plan_data import (
    SCHEDULER_DAYS, SCHEDULER_WEEK_COL, exercise_plans, load_plan, workout_groups,
)
from app_utils.plots import macros_chart, weight_chart, workout_load_plot
from app_utils.storage import KeyValueStore
from features import grocery, nutrition, scheduler, weight, workouts
from features.insights import dashboard_summary, entries_frame, weight_frame

setup_logging()

# =========================
# 0) APP CONFIG + THEME
# =========================
st.set_page_config(page_title="PPL Tracker", layout="wide", page_icon="🏋️")

CUSTOM_CSS = """
<style>
.block-container {padding-top: 1.2rem; padding-bottom: 2rem; max-width: 1300px;}
h1, h2, h3 {letter-spacing: -0.02em;}
.card {
  border: 1px solid rgba(255,255,255,0.08);
  background: rgba(255,255,255,0.03);
  border-radius: 18px;
  padding: 16px 16px;
  box-shadow: 0 12px 30px rgba(0,0,0,0.18);
}
.small {opacity: 0.85; font-size: 0.92rem;}
.badge {
  display:inline-block;
  padding: 4px 10px;
  border-radius: 999px;
  background: rgba(99, 102, 241, 0.18);
  border: 1px solid rgba(99, 102, 241, 0.35);
  font-size: 0.85rem;
}
hr {opacity: 0.25;}
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


@st.cache_resource
def get_store():
    return KeyValueStore(DB_PATH)


@st.cache_data
def get_plan():
    return load_plan(PLAN_PATH)


store = get_store()
plan = get_plan()


# =========================
# 1) UI BLOCKS
# =========================
def stat_card(title, items, tag=""):
    cells = "".join(
        f'<div><div class="small">{label}</div><div style="font-size:1.2rem;"><b>{value}</b></div></div>'
        for label, value in items
    )
    st.markdown(f"""
    <div class="card">
      <div style="display:flex; justify-content:space-between; align-items:center;">
        <div><b>{title}</b></div>
        <div class="badge">{tag}</div>
      </div>
      <hr/>
      <div style="display:grid; grid-template-columns: repeat({max(1, len(items))}, 1fr); gap:10px;">{cells}</div>
    </div>
    """, unsafe_allow_html=True)


def clear_button(label, key, action):
    with st.expander(label):
        sure = st.checkbox("Yes, delete it all", key=f"{key}_confirm")
        if st.button("Clear", key=f"{key}_clear", disabled=not sure):
            action(store)
            st.success("Cleared.")
            st.rerun()


def dashboard_tab():
    entries = weight.load_weights(store)
    summary = dashboard_summary(entries)
    if summary is None or summary["weekly_loss"] is None:
        st.info("Not enough data to compute weekly statistics yet (two weeks of 7-day averages needed).")
    else:
        stat_card("This week", [
            ("Weekly avg change", f"{summary['weekly_loss']:+.2f} lb"),
            ("Calorie suggestion", summary["suggestion"]),
        ], tag="DASHBOARD")
    fig = weight_chart(weight_frame(entries), title="7-day average weight")
    if fig is not None:
        st.plotly_chart(fig, use_container_width=True)


def weight_tab():
    st.subheader("Log weight")
    c1, c2, c3 = st.columns([1, 1, 0.6])
    with c1:
        log_date = st.date_input("Date", value=date.today(), key="weight_date")
    with c2:
        value = st.number_input("Weight (lb)", min_value=0.0, max_value=1000.0, value=180.0, step=0.1, key="weight_value")
    with c3:
        st.write("")
        if st.button("Save weight", key="weight_save"):
            if weight.record_weight(store, log_date.isoformat(), value):
                st.success("Weight saved.")
            else:
                st.warning("Weight not saved: check the date and value.")

    entries = weight.load_weights(store)
    summary = weight.summarize(entries)
    if summary:
        items = [("Current weight", f"{summary['latest']:.1f} lb")]
        if summary["change"] is not None:
            items.append(("Change (7d)", f"{summary['change']:+.1f} lb"))
        stat_card("Summary", items, tag=summary["latest_date"])

    fig = weight_chart(weight_frame(entries))
    if fig is not None:
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.caption("Weight plot appears after your first weigh-in.")

    clear_button("Clear all weight entries", "weight", weight.clear_weights)


def workouts_tab():
    logs = workouts.load_workout_logs(store)
    groups = workout_groups(plan)
    if not groups:
        st.info("No workout plan loaded.")
        return

    st.subheader("Add log")
    c = st.columns([1.6, 0.6, 0.8, 0.6, 0.6])
    with c[0]:
        exercise = st.selectbox("Exercise", [ex.name for ex in exercise_plans(plan)], key="log_exercise")
    with c[1]:
        week = st.selectbox("Week", list(workouts.WEEKS), key="log_week")
    with c[2]:
        load = st.number_input("Load (lb)", min_value=0.0, value=0.0, step=0.5, key="log_load")
    with c[3]:
        reps = st.number_input("Reps", min_value=0, value=0, step=1, key="log_reps")
    with c[4]:
        st.write("")
        if st.button("Add Log", key="log_add"):
            if workouts.upsert_workout_log(store, exercise, week, load, reps):
                st.rerun()
            st.warning("Log not saved: check the exercise, load and reps.")

    st.caption("Edit a cell to log it. Blank out both load and reps to remove a week. Plan columns show the target load x reps.")
    for group in groups:
        st.markdown(f"### {group.name}")
        before = pd.DataFrame(workouts.table_rows(group.exercises, logs))
        after = st.data_editor(
            before, key=f"table_{group.name}", hide_index=True, use_container_width=True,
            disabled=workouts.read_only_columns(),
        )
        for i, ex in enumerate(group.exercises):
            for week in workouts.WEEKS:
                for field, col in (("load", f"W{week} Load"), ("reps", f"W{week} Reps")):
                    new = after.at[i, col]
                    if new != before.at[i, col]:
                        workouts.set_workout_field(store, ex.name, week, field, new)

        for ex in group.exercises:
            weeks, loads = workouts.load_series(workouts.load_workout_logs(store), ex.name)
            if not weeks:
                continue
            with st.expander(f"{ex.name} · plan & progress"):
                st.write(f"**Tempo:** {ex.tempo or '-'} · **Rest:** {ex.rest or '-'} · **RIR:** {ex.rir or '-'}")
                if ex.cues:
                    st.write(f"**Cues:** {ex.cues}")
                if ex.notes:
                    st.write(f"**Notes:** {ex.notes}")
                st.pyplot(workout_load_plot(ex.name, weeks, loads))

    clear_button("Clear all workout logs", "workouts", workouts.clear_workouts)


def nutrition_tab():
    if plan["nutrition"]:
        st.markdown("\n".join(f"- {line}" for line in plan["nutrition"]))

    st.subheader("Log food")
    c = st.columns(5)
    with c[0]:
        log_date = st.date_input("Date", value=date.today(), key="food_date")
    with c[1]:
        kcal = st.number_input("Calories", min_value=0.0, value=0.0, step=10.0, key="food_kcal")
    with c[2]:
        protein = st.number_input("Protein (g)", min_value=0.0, value=0.0, step=1.0, key="food_protein")
    with c[3]:
        carbs = st.number_input("Carbs (g)", min_value=0.0, value=0.0, step=1.0, key="food_carbs")
    with c[4]:
        fat = st.number_input("Fat (g)", min_value=0.0, value=0.0, step=1.0, key="food_fat")
    if st.button("Save food", key="food_save"):
        if nutrition.record_food(store, log_date.isoformat(), kcal, protein, carbs, fat):
            st.success("Food entry saved.")
        else:
            st.warning("Food entry not saved.")

    entries = nutrition.load_food(store)
    if entries:
        avg = nutrition.weekly_average(entries)
        stat_card("7-day average", [
            ("Calories", f"{avg['calories']:.0f}"),
            ("Protein", f"{avg['protein']:.0f} g"),
            ("Carbs", f"{avg['carbs']:.0f} g"),
            ("Fat", f"{avg['fat']:.0f} g"),
        ], tag=f"{avg['count']} entries")
        fig = macros_chart(entries_frame(entries, nutrition.MACROS))
        st.plotly_chart(fig, use_container_width=True)

    clear_button("Clear all food entries", "food", nutrition.clear_food)


def grocery_tab():
    purchased = grocery.load_purchased(store)
    rows = grocery.combined_list(plan["grocery_list"], grocery.load_custom_items(store), purchased)
    for i, row in enumerate(rows):
        name = row[grocery.ITEM_COL]
        c1, c2 = st.columns([0.08, 0.92])
        with c1:
            if st.button("✔️" if row["purchased"] else "⚪", key=f"buy_{i}_{name}"):
                grocery.toggle_purchased(store, name)
                st.rerun()
        with c2:
            st.markdown(f"**{name}** – {row[grocery.QTY_COL]}")

    st.subheader("Add item")
    c1, c2, c3 = st.columns([1, 1, 0.5])
    with c1:
        name = st.text_input("Item", key="grocery_name")
    with c2:
        qty = st.text_input("Weekly qty", key="grocery_qty")
    with c3:
        st.write("")
        if st.button("Add", key="grocery_add"):
            if grocery.add_custom_item(store, name.strip(), qty.strip()):
                st.rerun()
            st.warning("Item and quantity are both required.")

    clear_button("Clear grocery data (custom items and purchase marks)", "grocery", grocery.clear_grocery)


def scheduler_tab():
    if not plan["scheduler"]:
        st.info("No schedule loaded.")
        return
    progress = scheduler.load_progress(store)
    for row in plan["scheduler"]:
        week = str(row.get(SCHEDULER_WEEK_COL, ""))
        ratio = scheduler.completion_ratio(progress, week, SCHEDULER_DAYS)
        st.markdown(f"#### {week}")
        st.progress(ratio, text=f"{ratio:.0%} done")
        cols = st.columns(len(SCHEDULER_DAYS))
        for col, day in zip(cols, SCHEDULER_DAYS):
            cell = scheduler.cell(progress, week, day)
            with col:
                st.caption(f"{day}\n\n{row.get(day, '')}")
                done = st.checkbox("Done", value=cell["completed"], key=f"done_{week}_{day}")
                note = st.text_input("Notes", value=cell["note"], key=f"note_{week}_{day}",
                                     label_visibility="collapsed", placeholder="Notes")
                if done != cell["completed"]:
                    scheduler.set_progress(store, week, day, completed=done)
                if note != cell["note"]:
                    scheduler.set_progress(store, week, day, note=note)

    clear_button("Clear scheduler progress", "scheduler", scheduler.clear_scheduler)


# =========================
# 2) APP UI
# =========================
st.title("PPL Tracker")
st.caption("8-week push/pull/legs block · weight · macros · groceries · schedule")

tabs = st.tabs(["Dashboard", "Weight", "Workouts", "Nutrition", "Grocery", "Scheduler"])
with tabs[0]:
    dashboard_tab()
with tabs[1]:
    weight_tab()
with tabs[2]:
    workouts_tab()
with tabs[3]:
    nutrition_tab()
with tabs[4]:
    grocery_tab()
with tabs[5]:
    scheduler_tab()

st.markdown("---")
st.caption(f"Local DB: {DB_PATH} · Personal tracking tool")
