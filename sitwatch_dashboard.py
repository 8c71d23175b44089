"""
Sitwatch Dashboard
Desk widget showing how long you have been sitting and standing
"""

import time

import streamlit as st

from sitwatch import config
from sitwatch.event_logger import EventLogger, attach_logger
from sitwatch.formatting import format_duration, state_message, toggle_labels, warning_message
from sitwatch.models import Reset, Tick, Toggle
from sitwatch.posture_timer import PostureTimer
from posture_chart import render_counter_chart, render_session_events

WIDGET_CSS = """
<style>
    .clock {
        font-size: 2.5rem;
        font-weight: 700;
        text-align: center;
        font-variant-numeric: tabular-nums;
        color: #1a3a3a;
    }

    .clock-label {
        font-size: 0.9rem;
        color: #5a7c71;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        text-align: center;
    }

    .posture-banner {
        font-size: 2rem;
        font-weight: 600;
        text-align: center;
        padding: 1rem;
        border-radius: 0.75rem;
        color: white;
        background: linear-gradient(135deg, #2d7a8f 0%, #4a9d6f 100%);
    }

    .stDeployButton {display: none;}
    footer {visibility: hidden;}
</style>
"""

# Chart and event table are redrawn less often than the clocks
SLOW_REFRESH_SECONDS = 1.0


def send(event) -> None:
    """Button callback: forward a user action to the timer."""
    st.session_state.timer.handle(event)


def render_posture_banner(timer: PostureTimer) -> None:
    st.markdown(f'<div class="posture-banner">{state_message(timer.current_posture())}</div>',
                unsafe_allow_html=True)


def render_clocks(timer: PostureTimer) -> None:
    col1, col2 = st.columns(2)

    with col1:
        st.markdown(f"""
        <div class="clock">{format_duration(timer.sitting_elapsed())}</div>
        <div class="clock-label">Sitting</div>
        """, unsafe_allow_html=True)

    with col2:
        st.markdown(f"""
        <div class="clock">{format_duration(timer.standing_elapsed())}</div>
        <div class="clock-label">Standing</div>
        """, unsafe_allow_html=True)

    if timer.sitting_warning_exceeded():
        st.error(warning_message(timer.max_sitting_time))


def render_controls(timer: PostureTimer) -> None:
    """Toggle and reset buttons"""
    sitting_label, standing_label = toggle_labels(timer.current_posture())

    col1, col2, col3 = st.columns(3)

    with col1:
        st.button(sitting_label, key="sitting_toggle", on_click=send, args=(Toggle(),),
                  use_container_width=True)

    with col2:
        st.button(standing_label, key="standing_toggle", on_click=send, args=(Toggle(),),
                  use_container_width=True)

    with col3:
        st.button("Reset", key="reset", type="primary", on_click=send, args=(Reset(),),
                  use_container_width=True)


class SitwatchDashboard:
    """Posture timer widget, ticking while the page is open"""

    def __init__(self, update_interval: float = config.DASHBOARD_REFRESH_INTERVAL):
        self.update_interval = update_interval

        if 'sitwatch_initialized' not in st.session_state:
            self._initialize()

    def _initialize(self):
        """Initialize session state"""
        st.session_state.sitwatch_initialized = True

        st.session_state.timer = PostureTimer()
        st.session_state.event_logger = EventLogger()
        attach_logger(st.session_state.timer, st.session_state.event_logger)

        print(f"Sitwatch started: sitting limit {format_duration(config.MAX_SITTING_TIME)}")

    def update_data(self) -> PostureTimer:
        """Deliver one tick to the timer"""
        timer = st.session_state.timer
        timer.handle(Tick(now=time.monotonic()))
        return timer

    def run(self):
        """Main app"""
        st.set_page_config(
            page_title=config.APP_TITLE,
            page_icon="",
            layout="centered",
            initial_sidebar_state="collapsed"
        )
        st.markdown(WIDGET_CSS, unsafe_allow_html=True)

        timer = self.update_data()

        banner_placeholder = st.empty()
        clocks_placeholder = st.empty()

        render_controls(timer)

        st.divider()

        chart_placeholder = st.empty()
        events_placeholder = st.empty()

        last_slow_refresh = 0.0

        # Main loop; a button press reruns the script and restarts it
        while True:
            timer = self.update_data()

            with banner_placeholder.container():
                render_posture_banner(timer)

            with clocks_placeholder.container():
                render_clocks(timer)

            current_time = time.monotonic()
            if current_time - last_slow_refresh >= SLOW_REFRESH_SECONDS:
                with chart_placeholder.container():
                    render_counter_chart(timer)
                with events_placeholder.container():
                    render_session_events(st.session_state.event_logger)
                last_slow_refresh = current_time

            time.sleep(self.update_interval)


if __name__ == "__main__":
    dashboard = SitwatchDashboard()
    dashboard.run()
