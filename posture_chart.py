"""
Posture Counter Visualization
Minimal bar chart of the sitting and standing counters against their limits
"""

from typing import List, Dict

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from sitwatch.event_logger import EventLogger
from sitwatch.formatting import format_duration
from sitwatch.posture_timer import PostureTimer

SITTING_COLOR = '#2D7A8F'
STANDING_COLOR = '#4A9D6F'
WARNING_COLOR = '#E4572E'


def build_counter_figure(timer: PostureTimer) -> go.Figure:
    """
    Build a two-bar chart of elapsed minutes per posture.

    Args:
        timer: PostureTimer instance

    Returns:
        Plotly figure with a dashed line at each posture's threshold
    """
    sitting_min = timer.sitting_elapsed() / 60.0
    standing_min = timer.standing_elapsed() / 60.0

    sitting_color = WARNING_COLOR if timer.sitting_warning_exceeded() else SITTING_COLOR

    fig = go.Figure(data=[
        go.Bar(
            x=['Sitting', 'Standing'],
            y=[sitting_min, standing_min],
            marker_color=[sitting_color, STANDING_COLOR],
            text=[format_duration(timer.sitting_elapsed()),
                  format_duration(timer.standing_elapsed())],
            textposition='outside',
            hovertemplate='<b>%{x}</b><br>%{y:.1f} min<extra></extra>'
        )
    ])

    limits = (
        (0, timer.max_sitting_time / 60.0),
        (1, timer.max_standing_time / 60.0),
    )
    for index, limit in limits:
        fig.add_shape(
            type='line',
            x0=index - 0.4, x1=index + 0.4,
            y0=limit, y1=limit,
            line=dict(color='#5A7C71', width=2, dash='dash')
        )

    fig.update_layout(
        title=None,
        height=320,
        margin=dict(l=60, r=20, t=20, b=40),
        plot_bgcolor='white',
        showlegend=False
    )

    fig.update_yaxes(
        title_text='Minutes',
        showgrid=True,
        gridcolor='#E8F0F0',
        rangemode='tozero'
    )

    return fig


def events_to_frame(events: List[Dict]) -> pd.DataFrame:
    """
    Flatten session events into a table, newest first.

    Args:
        events: Event dictionaries from EventLogger

    Returns:
        DataFrame with one row per event
    """
    rows = []
    for event in reversed(events):
        transition = event.get('transition', {})
        rows.append({
            'Time': event['logged_at'][-8:],
            'Event': event['event_type'].replace('_', ' '),
            'From': transition.get('from', ''),
            'To': transition.get('to', ''),
            'Duration': format_duration(
                transition.get('left_duration', event.get('sitting_duration', 0.0))
            ),
        })

    return pd.DataFrame(rows, columns=['Time', 'Event', 'From', 'To', 'Duration'])


def render_counter_chart(timer: PostureTimer) -> None:
    st.plotly_chart(build_counter_figure(timer), use_container_width=True)


def render_session_events(event_logger: EventLogger, n: int = 10) -> None:
    """Render the most recent session events and counters."""
    st.markdown("### This Session")

    metrics = event_logger.get_session_metrics()
    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Posture Switches", metrics['toggles'])

    with col2:
        st.metric("Sitting Warnings", metrics['warnings'])

    with col3:
        st.metric("Longest Sit", format_duration(metrics['max_sitting_bout']))

    events = event_logger.get_recent_events(n=n)
    if not events:
        st.caption("No posture changes yet")
        return

    st.dataframe(events_to_frame(events), hide_index=True, use_container_width=True)
