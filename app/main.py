"""
Streamlit Frontend for Eco Helper

The page the user interacts with: log an activity, see today's
impact, and read the tips picked for them.

DESIGN PRINCIPLES:
1. Simple, clear interface
2. Every submission gets visible feedback
3. Clear error messages in simple language
4. Figures always match what has been logged

The session lives in st.session_state, so it is lost on restart.
"""

import streamlit as st

from eco_helper.config import validate_all_settings
from eco_helper.models.activity import ActivityCategory, activity_types_for
from eco_helper.models.dashboard import DashboardSnapshot, MetricCard
from eco_helper.orchestrator import EcoSession, create_app_components


# Page configuration
st.set_page_config(
    page_title="Eco Helper",
    page_icon="🌿",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS for the cards
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .metric-card {
        padding: 20px;
        background-color: #f4faf6;
        border-radius: 10px;
        border-top: 4px solid #2e8b57;
        margin: 10px 0;
    }
    .tip-card {
        padding: 16px;
        background-color: #ffffff;
        border-radius: 10px;
        border: 1px solid #e3e8e5;
        margin: 10px 0;
        min-height: 170px;
    }
    .impact-high {
        color: #1e7b45;
        font-weight: bold;
    }
    .impact-medium {
        color: #c98a00;
        font-weight: bold;
    }
    .impact-low {
        color: #6c757d;
    }
    .big-number {
        font-size: 2.5em;
        font-weight: bold;
        color: #2c3e50;
    }
    .saving {
        color: #1e7b45;
        font-weight: 600;
    }
</style>
""", unsafe_allow_html=True)


def get_session() -> EcoSession:
    """Get or create this browser session's tracking session."""
    if "eco_session" not in st.session_state:
        st.session_state.eco_session = create_app_components()
    return st.session_state.eco_session


def main():
    """Main application entry point."""
    session = get_session()

    st.sidebar.title("🌿 Eco Helper")
    st.sidebar.markdown("Track & reduce your environmental impact")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["📊 Dashboard", "⚙️ Settings"],
        index=0,
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        """
        **How to use:**
        1. Pick water or energy
        2. Choose the activity
        3. Enter liters or kWh and log it
        """
    )

    if page == "📊 Dashboard":
        render_dashboard_page(session)
    elif page == "⚙️ Settings":
        render_settings_page(session)


def render_metric_card(card: MetricCard):
    saving_html = ""
    if card.shows_saving:
        saving_html = (
            f'<p>Potential saving: <span class="saving">'
            f'{card.potential_saving} {card.unit}</span></p>'
        )
    st.markdown(f"""
    <div class="metric-card">
        <h4>{card.icon} {card.title}</h4>
        <div class="big-number">{card.value_text} <small>{card.unit}</small></div>
        {saving_html}
    </div>
    """, unsafe_allow_html=True)


def render_impact_section(snapshot: DashboardSnapshot):
    st.subheader("📉 Your Impact Today")

    col1, col2, col3 = st.columns(3)
    with col1:
        render_metric_card(snapshot.water_card)
    with col2:
        render_metric_card(snapshot.energy_card)
    with col3:
        st.markdown(f"""
        <div class="metric-card">
            <h4>🌿 Activities Logged</h4>
            <div class="big-number">{snapshot.activity_count}</div>
            <p>{snapshot.count_message}</p>
        </div>
        """, unsafe_allow_html=True)


def render_log_form(session: EcoSession):
    st.subheader("➕ Log Activity")
    st.markdown("Track your daily water and energy usage")

    col1, col2, col3 = st.columns(3)

    with col1:
        category = st.selectbox(
            "Category",
            options=list(ActivityCategory),
            format_func=lambda c: f"{c.icon} {c.value.title()}",
        )

    descriptors = activity_types_for(category)
    with col2:
        descriptor = st.selectbox(
            "Activity",
            options=[None] + list(descriptors),
            format_func=lambda d: "Select activity" if d is None else f"{d.icon} {d.label}",
        )

    with col3:
        placeholder = "0"
        if descriptor is not None:
            placeholder = str(descriptor.avg_magnitude)
        duration = st.text_input(
            "Liters" if category is ActivityCategory.WATER else "kWh",
            placeholder=placeholder,
            key=f"duration_{category.value}",
        )

    if st.button("➕ Log Activity", type="primary"):
        outcome = session.log_activity(
            category=category,
            activity_type=descriptor.value if descriptor else None,
            duration=duration,
        )
        if outcome.accepted:
            st.success(outcome.message)
            for warning in outcome.validation.warnings:
                st.warning(warning)
        else:
            st.error(outcome.message)
            with st.expander("Details"):
                st.text(
                    session.validator.get_user_friendly_summary(outcome.validation)
                )


def render_recent_activities(snapshot: DashboardSnapshot):
    if not snapshot.recent:
        return

    st.markdown("#### Recent Activities")
    for row in snapshot.recent:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"{row.icon} **{row.label}**  \n<small>{row.time_text}</small>",
                        unsafe_allow_html=True)
        with col2:
            st.markdown(f"**{row.magnitude_text}**")


def render_tips(snapshot: DashboardSnapshot):
    st.subheader("💡 Personalized Tips")

    columns = st.columns(3)
    for index, tip in enumerate(snapshot.tips):
        with columns[index % 3]:
            st.markdown(f"""
            <div class="tip-card">
                <div>{tip.icon} <span class="impact-{tip.impact}">{tip.badge}</span></div>
                <h5>{tip.title}</h5>
                <p>{tip.description}</p>
            </div>
            """, unsafe_allow_html=True)


def render_dashboard_page(session: EcoSession):
    """Render the main dashboard."""
    st.title("🌿 Eco Helper")

    # The form runs first so the figures below include this run's submission
    render_log_form(session)

    snapshot = session.dashboard

    st.markdown("---")
    render_impact_section(snapshot)

    st.markdown("---")
    render_recent_activities(snapshot)

    st.markdown("---")
    render_tips(snapshot)


def render_settings_page(session: EcoSession):
    """Render the settings page."""
    st.title("⚙️ Settings")

    st.markdown("### Configuration Status")

    status = validate_all_settings()
    if status.get("app", False):
        st.success("✅ Application settings loaded")
    else:
        st.error(f"❌ Application settings - {status.get('app_error', 'Not configured')}")

    settings = session.settings
    st.markdown(f"""
    - **Environment:** {settings.app_environment}
    - **Water saving estimate:** {settings.water_saving_rate:.0%}
    - **Energy saving estimate:** {settings.energy_saving_rate:.0%}
    - **Tips shown:** {settings.max_tips}
    - **Recent activities shown:** {settings.recent_activity_limit}
    """)

    st.markdown("---")
    st.markdown("### Session History")

    if session.audit_logger is None:
        st.info("Audit trail is disabled for this session.")
        return

    events = session.audit_logger.recent_events(limit=50)
    if not events:
        st.info("Nothing logged yet.")
    for event in events:
        st.markdown(
            f"`{event.timestamp.strftime('%H:%M:%S')}` {event.description}"
        )

    st.markdown("---")
    st.markdown(
        "To change these values, set `ECO_HELPER_*` environment variables "
        "or add them to a `.env` file."
    )


if __name__ == "__main__":
    main()
