"""
Onboarding Wizard - one question per step
Collects the UserInputs fields, validating each step before moving on.
Answers live only in st.session_state and are discarded when the session ends.
"""

import logging

import streamlit as st

from config_utils import ONBOARDING_STEPS, get_default_inputs, get_onboarding_widget_mappings
from io_utils import dict_to_inputs
from validation import validate_inputs, errors_for_field

logger = logging.getLogger(__name__)

WIDGET_KEYS = {field: key for key, field in get_onboarding_widget_mappings().items()}


def initialize_onboarding_state():
    """Initialize session state for the wizard"""
    if 'onboarding_step' not in st.session_state:
        st.session_state.onboarding_step = 0
    if 'user_inputs' not in st.session_state:
        st.session_state.user_inputs = get_default_inputs()
    if 'onboarding_completed' not in st.session_state:
        st.session_state.onboarding_completed = False
    if 'step_errors' not in st.session_state:
        st.session_state.step_errors = []


def create_progress_bar():
    current_step = st.session_state.onboarding_step
    total_steps = len(ONBOARDING_STEPS)

    st.progress((current_step + 1) / total_steps)
    st.caption(f"Question {current_step + 1} of {total_steps}")


def render_step_input(step):
    """Render the widget for a single step and store its value"""
    field = step['id']
    current_value = st.session_state.user_inputs.get(field)
    widget_key = WIDGET_KEYS[field]

    if step['input_type'] == 'slider':
        value = st.slider(
            step['title'],
            min_value=step['min'],
            max_value=step['max'],
            value=min(max(current_value, step['min']), step['max']),
            step=step['step'],
            help=step.get('tooltip'),
            key=widget_key
        )
        st.markdown(f"### {step.get('prefix', '')}{value:,}{step.get('suffix', '')}")
    elif step['input_type'] == 'toggle':
        value = st.toggle(step['title'], value=bool(current_value),
                          help=step.get('tooltip'), key=widget_key)
    else:
        options = step['options']
        index = options.index(current_value) if current_value in options else len(options) - 1
        value = st.selectbox(step['title'], options, index=index,
                             help=step.get('tooltip'), key=widget_key)

    st.session_state.user_inputs[field] = value


def go_to_next_step():
    """Advance unless the validator flags the current step's field"""
    step = ONBOARDING_STEPS[st.session_state.onboarding_step]
    inputs = dict_to_inputs(st.session_state.user_inputs)
    messages = errors_for_field(validate_inputs(inputs), step['id'])

    if messages:
        logger.debug("Blocked on step %s: %s", step['id'], messages)
        st.session_state.step_errors = messages
        return

    st.session_state.step_errors = []
    if st.session_state.onboarding_step == len(ONBOARDING_STEPS) - 1:
        st.session_state.onboarding_completed = True
        st.switch_page("pages/dashboard.py")
    else:
        st.session_state.onboarding_step += 1
        st.rerun()


def create_navigation_buttons():
    col1, col2, col3 = st.columns([1, 1, 1])
    is_last_step = st.session_state.onboarding_step == len(ONBOARDING_STEPS) - 1

    with col1:
        if st.session_state.onboarding_step > 0:
            if st.button("← Back"):
                st.session_state.onboarding_step -= 1
                st.session_state.step_errors = []
                st.rerun()

    with col3:
        if st.button("See my results →" if is_last_step else "Next →", type="primary"):
            go_to_next_step()


initialize_onboarding_state()

st.title("🧭 Retirement Snapshot")
create_progress_bar()

render_step_input(ONBOARDING_STEPS[st.session_state.onboarding_step])

for message in st.session_state.step_errors:
    st.error(message)

create_navigation_buttons()
