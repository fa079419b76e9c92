# app.py
# Run:
#   streamlit run app.py
#
# Countdown and habit check-in grids. State lives in data/daygrid.db
# (override with DAYGRID_DB_PATH).

import html
import logging

import plotly.express as px
import streamlit as st

from app_utils.dates import local_today
from app_utils.grid import GridTooDense
from app_utils.logger import setup_logger
from app_utils.settings import SettingsStore, TrackerKind
from app_utils.storage import KeyValueStore, make_engine
from app_utils.render import RenderMode
from config import get_config
from features.habits import check_in
from features.insights import current_streak, longest_streak, month_summary, weekly_counts
from features.setup import (RESET_DATA, SETTINGS_ACTIONS, TARGET_HINT, TARGET_PROMPT, SetupState,
                            apply_setting, run_setup, target_rejected)
from features.widget import render


# =========================
# 0) APP CONFIG + THEME
# =========================
st.set_page_config(page_title="Day Grid", layout="centered", page_icon="🟩")

CONFIG = get_config()
setup_logger(str(CONFIG.logging.log_file), level=CONFIG.logging.level,
             max_bytes=CONFIG.logging.max_bytes, backup_count=CONFIG.logging.backup_count)
logger = logging.getLogger("daygrid.app")

CUSTOM_CSS = """
<style>
.block-container {padding-top: 1.2rem; padding-bottom: 2rem; max-width: 900px;}
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
.widget {box-shadow: 0 12px 30px rgba(0,0,0,0.18);}
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# =========================
# 1) STORAGE
# =========================
@st.cache_resource
def kv_store():
    return KeyValueStore(make_engine(str(CONFIG.storage.db_path)))


# =========================
# 2) PROMPTS
# =========================
class StreamlitPrompter:
    """Prompts as one-shot forms; an unsubmitted form reads as dismissed."""

    def __init__(self, key):
        self.key = key
        self.submitted = {}

    def choose(self, title, message, options):
        with st.form(f"{self.key}_choose_{title}"):
            st.markdown(f"**{title}**")
            if message:
                st.caption(message)
            choice = st.radio(title, options, label_visibility="collapsed", key=f"{self.key}_radio_{title}")
            ok = st.form_submit_button("OK")
        return choice if ok else None

    def ask(self, title, placeholder):
        with st.form(f"{self.key}_ask_{title}"):
            value = st.text_input(title, placeholder=placeholder, key=f"{self.key}_text_{title}")
            ok = st.form_submit_button("OK")
        if not ok:
            return None
        self.submitted[title] = value
        return value.strip() or None


# =========================
# 3) UI BLOCKS
# =========================
def header_block(name, subtitle, tag):
    st.markdown(f"""
    <div class="card">
      <div style="display:flex; justify-content:space-between; align-items:flex-start; gap:12px;">
        <div>
          <h2 style="margin:0;">{html.escape(name)}</h2>
          <div class="small">{subtitle}</div>
        </div>
        <div class="badge">{tag}</div>
      </div>
    </div>
    """, unsafe_allow_html=True)


def widget_panel(store, today):
    widget = CONFIG.widget_for(store.kind.value)
    try:
        markup = render(store, today, widget, RenderMode.PRESENT)
    except GridTooDense as ex:
        logger.warning("%s grid not drawn: %s", store.kind.value, ex)
        st.warning(f"Grid too dense to draw: {ex}")
        return
    if markup is None:
        st.info("Nothing to show yet.")
        return
    st.markdown(markup, unsafe_allow_html=True)
    st.write("")

    cols = st.columns([1, 1])
    if store.kind is TrackerKind.HABIT:
        with cols[0]:
            if st.button("Check-in", key=f"{store.kind.value}_checkin"):
                st.session_state[f"{store.kind.value}_flash"] = check_in(store, today)
                st.rerun()
    with cols[1]:
        if st.button("Save home-screen snapshot", key=f"{store.kind.value}_snapshot"):
            path = render(store, today, widget, RenderMode.HOME_SCREEN, CONFIG.storage.snapshot_dir / f"{store.kind.value}.png")
            if path:
                st.image(str(path), caption=str(path))

    flash = st.session_state.pop(f"{store.kind.value}_flash", None)
    if flash:
        st.success(flash)


def insights_panel(store, today):
    completions = store.completions()
    summary = month_summary(completions, today)

    c1, c2, c3 = st.columns(3)
    c1.metric("This month", f"{summary['done']}/{summary['total']}", f"{summary['rate']:.0%}")
    c2.metric("Current streak", current_streak(completions, today))
    c3.metric("Longest streak", longest_streak(completions))

    weekly = weekly_counts(completions, today)
    if weekly["days_done"].sum() == 0:
        st.info("No check-ins yet. Tap Check-in to start the grid.")
        return
    fig = px.bar(weekly, x="week", y="days_done", title="Days done per week")
    fig.update_layout(height=320, margin=dict(l=10, r=10, t=40, b=10))
    fig.update_yaxes(range=[0, 7], title="days")
    st.plotly_chart(fig, use_container_width=True)


def settings_panel(store, today):
    action = st.selectbox("Setting", SETTINGS_ACTIONS[store.kind], key=f"{store.kind.value}_action")
    prompter = StreamlitPrompter(f"{store.kind.value}_settings")
    if action == RESET_DATA:
        # no prompt to submit, so ask for an explicit click
        if st.button("Clear all check-ins", key=f"{store.kind.value}_clear"):
            apply_setting(store, prompter, action, today)
            st.success("Check-ins cleared.")
    elif apply_setting(store, prompter, action, today):
        st.success(f"{action}: saved.")
    elif target_rejected(prompter.submitted.get(TARGET_PROMPT)):
        st.warning(TARGET_HINT)

    st.markdown("---")
    if st.button("Forget this tracker", key=f"{store.kind.value}_reset"):
        store.reset()
        st.rerun()


# =========================
# 4) APP UI
# =========================
st.title("Day Grid")
st.caption("Countdown and habit check-in grids · one cell per day")

st.sidebar.markdown("### Tracker")
choice = st.sidebar.radio("Choose tracker", ["Countdown", "Habit"], index=0)

kind = TrackerKind.COUNTDOWN if choice == "Countdown" else TrackerKind.HABIT
store = SettingsStore(kv_store(), kind)
today = local_today()

st.sidebar.markdown("---")
st.sidebar.write(f"• State stored in **{CONFIG.storage.db_path}**")
st.sidebar.write(f"• Snapshots saved to **{CONFIG.storage.snapshot_dir}**")

setup_prompter = StreamlitPrompter(f"{kind.value}_setup")
state = run_setup(store, setup_prompter, today)
if state is not SetupState.CONFIGURED:
    if target_rejected(setup_prompter.submitted.get(TARGET_PROMPT)):
        st.warning(TARGET_HINT)
    st.stop()

label = store.label()
if kind is TrackerKind.COUNTDOWN:
    header_block(label, f"Counting down to {store.target_date().isoformat()}", "COUNTDOWN")
    tabs = st.tabs(["Widget", "Settings"])
    with tabs[0]:
        widget_panel(store, today)
    with tabs[1]:
        settings_panel(store, today)
else:
    header_block(label, "Daily check-in", "HABIT")
    tabs = st.tabs(["Widget", "Insights", "Settings"])
    with tabs[0]:
        widget_panel(store, today)
    with tabs[1]:
        insights_panel(store, today)
    with tabs[2]:
        settings_panel(store, today)

st.markdown("---")
st.caption(f"Local DB: {CONFIG.storage.db_path} · Personal tracking tool")
