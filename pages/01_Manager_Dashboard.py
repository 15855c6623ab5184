# =============================================================================
# 01_Manager_Dashboard.py - Reservation management for the restaurant manager
# =============================================================================
"""
Manager Dashboard

Tab Structure:
1. Visão Geral - stats and the latest reservations
2. Reservas - status filter, confirm / cancel pending reservations
3. Marketing - Instagram captions for menu dishes

Data Sources:
- Reservations: ReservationViewModel (Supabase first, local fallback)
- Dishes: fuego_core.data.menu
"""
from __future__ import annotations
import streamlit as st

from fuego_core.ai import TONES, generate_marketing_copy
from fuego_core.auth import is_manager_session, login_manager, logout_manager
from fuego_core.auth.authentication import LOGIN_ERROR_MESSAGE, WELCOME_MESSAGE
from fuego_core.config import get_settings
from fuego_core.data.menu import MENU_HIGHLIGHTS, find_menu_item
from fuego_core.data.reservation import ReservationStatus
from fuego_core.errors import safe_execute
from fuego_core.services import STATUS_FILTERS
from fuego_core.state import get_view_model
from fuego_core.ui.components import (
    render_connection_badge,
    render_notifications,
    render_schema_help,
)
from fuego_core.ui.theme import apply_css, reservation_card

st.set_page_config(
    page_title="Gestão - Fuego Prime",
    page_icon="🔥",
    layout="wide",
)

apply_css()

LOAD_ERROR_MESSAGE = "Erro ao carregar reservas."

# ============================================================================
# MANAGER GATE
# ============================================================================
if not is_manager_session():
    st.title("Acesso restrito")
    with st.form("manager_login"):
        password = st.text_input("Senha", type="password")
        if st.form_submit_button("Entrar"):
            if login_manager(password, get_settings().manager_password_hash):
                st.toast(WELCOME_MESSAGE, icon="ℹ️")
                st.rerun()
            else:
                st.error(LOGIN_ERROR_MESSAGE)
    st.stop()

view_model = get_view_model()

# Reload on every entry into the dashboard
if not st.session_state.get("_dashboard_loaded", False):
    with st.spinner("Carregando reservas..."):
        safe_execute(view_model.activate, error_message=LOAD_ERROR_MESSAGE)
    st.session_state["_dashboard_loaded"] = True

header_left, header_right = st.columns([4, 1])
with header_left:
    st.title("Painel de Gestão")
    render_connection_badge(view_model.is_online)
    with st.expander("Detalhes da conexão"):
        st.json(view_model.prober.get_status_display())
with header_right:
    if st.button("Atualizar"):
        safe_execute(view_model.activate, error_message=LOAD_ERROR_MESSAGE)
    if st.button("Sair"):
        logout_manager()
        st.session_state["_dashboard_loaded"] = False
        st.rerun()

if view_model.schema_missing:
    render_schema_help()

tab_overview, tab_reservations, tab_marketing = st.tabs(["Visão Geral", "Reservas", "Marketing"])


def _status_buttons(reservation, key_prefix: str) -> None:
    if reservation.status.is_terminal:
        return
    confirm_col, cancel_col = st.columns(2)
    with confirm_col:
        if st.button("Confirmar", key=f"{key_prefix}_confirm_{reservation.id}"):
            view_model.update_status(reservation.id, ReservationStatus.CONFIRMED)
            st.rerun()
    with cancel_col:
        if st.button("Cancelar", key=f"{key_prefix}_cancel_{reservation.id}"):
            view_model.update_status(reservation.id, ReservationStatus.CANCELLED)
            st.rerun()


# ============================================================================
# OVERVIEW
# ============================================================================
with tab_overview:
    stats = view_model.stats()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total", stats["total"])
    c2.metric("Pendentes", stats["pending"])
    c3.metric("Confirmadas", stats["confirmed"])
    c4.metric("Hoje", stats["today"])

    st.subheader("Últimas reservas")
    for reservation in view_model.filtered("all")[:5]:
        with st.container(border=True):
            st.markdown(
                reservation_card(reservation),
                unsafe_allow_html=True,
            )
            _status_buttons(reservation, "overview")

    if not view_model.is_online:
        st.warning("Atenção: Você está visualizando dados locais offline.")

# ============================================================================
# RESERVATIONS
# ============================================================================
with tab_reservations:
    status_filter = st.radio(
        "Status",
        STATUS_FILTERS,
        horizontal=True,
        format_func=lambda s: "Todos" if s == "all" else s,
    )
    st.dataframe(view_model.table(status_filter), use_container_width=True, hide_index=True)

    pending = view_model.filtered(ReservationStatus.PENDING.value)
    if pending and status_filter in ("all", "pending"):
        st.subheader("Aguardando aprovação")
        for reservation in pending:
            with st.container(border=True):
                st.write(
                    f"{reservation.client_name} • {reservation.phone} • "
                    f"{reservation.date} {reservation.time} • {reservation.pax} • {reservation.table_type}"
                )
                _status_buttons(reservation, "list")

# ============================================================================
# MARKETING
# ============================================================================
with tab_marketing:
    dish_id = st.selectbox(
        "Prato",
        [item.id for item in MENU_HIGHLIGHTS],
        format_func=lambda i: find_menu_item(i).name,
    )
    tone = st.radio("Tom de voz", TONES, horizontal=True, index=1)
    if st.button("Gerar legenda"):
        dish = find_menu_item(dish_id)
        with st.spinner("Gerando..."):
            st.session_state["_generated_copy"] = generate_marketing_copy(
                dish.name, dish.description, tone
            )
    if st.session_state.get("_generated_copy"):
        st.text_area("Legenda", st.session_state["_generated_copy"], height=200)

render_notifications(view_model)
