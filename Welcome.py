from __future__ import annotations
import streamlit as st

from fuego_core.data.reservation import (
    DEFAULT_TIME,
    PAX_OPTIONS,
    TABLE_TYPES,
    TIME_SLOTS,
    ReservationInput,
    format_phone,
)
from fuego_core.errors import safe_execute
from fuego_core.logging import setup_logging
from fuego_core.state import get_view_model
from fuego_core.ui.components import render_notifications
from fuego_core.ui.theme import apply_css, hero_card

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================
st.set_page_config(
    page_title="Fuego Prime - Reservas",
    page_icon="🔥",
    layout="wide",
    initial_sidebar_state="collapsed",
)

if "_logging_ready" not in st.session_state:
    setup_logging(log_to_file=False)
    st.session_state["_logging_ready"] = True

apply_css()

view_model = get_view_model()
if not view_model.is_activated:
    safe_execute(view_model.activate, error_message="Erro ao carregar reservas.")
# Entering the dashboard again reloads from the stores
st.session_state["_dashboard_loaded"] = False

hero_card("Fuego Prime", "Carnes nobres na brasa. Reserve sua mesa.")

# ============================================================================
# RESERVATION FORM
# ============================================================================
st.subheader("Reserve sua mesa")

with st.form("reservation_form", clear_on_submit=True):
    name = st.text_input("Nome completo *")
    phone = st.text_input("Telefone / WhatsApp *", placeholder="(11) 99999-9999")
    col1, col2 = st.columns(2)
    with col1:
        day = st.date_input("Data *", value=None, format="DD/MM/YYYY")
    with col2:
        slot = st.selectbox("Horário", TIME_SLOTS, index=TIME_SLOTS.index(DEFAULT_TIME))
    col3, col4 = st.columns(2)
    with col3:
        pax = st.selectbox("Número de Pessoas", PAX_OPTIONS)
    with col4:
        table_type = st.selectbox("Mesa Preferencial", TABLE_TYPES)

    submitted = st.form_submit_button("CONFIRMAR MESA", use_container_width=True)
    st.caption("* Sua reserva será enviada para aprovação do gerente.")

if submitted:
    with st.spinner("Enviando solicitação..."):
        view_model.submit(ReservationInput(
            client_name=name.strip(),
            phone=format_phone(phone),
            date=day.isoformat() if day else "",
            time=slot,
            pax=pax,
            table_type=table_type,
        ))

render_notifications(view_model)
