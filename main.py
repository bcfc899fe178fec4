"""
Retirement Snapshot - Main Application Entry Point

A Streamlit multipage application that turns a handful of answers into a
retirement projection:
- Step-by-step onboarding questions with per-step validation
- Dashboard with projected nest egg, 4% rule income and estimated taxes
- Interactive what-if tools for additional monthly investment
"""

import logging

import streamlit as st

logging.basicConfig(level=logging.INFO)


def start_page():
    """Start page content"""
    if 'onboarding_completed' not in st.session_state:
        st.session_state.onboarding_completed = False

    st.title("🧭 Retirement Snapshot")

    st.markdown("""
    ### See where your retirement savings are headed

    Answer eight quick questions about your age, income, spending and savings.
    We'll project your nest egg, the monthly income it could support and how
    much more to invest to reach your goal.
    """)

    if st.button("🚀 Get started", type="primary"):
        st.switch_page("pages/onboarding.py")

    st.markdown("---")

    col1, col2 = st.columns(2)
    with col1:
        if st.session_state.onboarding_completed:
            st.success("✅ Your answers are ready. Open the dashboard from the sidebar.")
        else:
            st.info("ℹ️ Nothing is stored: your answers are discarded when you close the page.")
    with col2:
        st.info("💡 **Tip**: Estimates only, not financial advice.")


st.set_page_config(
    page_title="Retirement Snapshot",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded"
)

pages = [
    st.Page(start_page, title="Start", icon="🏠"),
    st.Page("pages/onboarding.py", title="Questions", icon="📝"),
    st.Page("pages/dashboard.py", title="Dashboard", icon="📊"),
]

pg = st.navigation(pages)
pg.run()
