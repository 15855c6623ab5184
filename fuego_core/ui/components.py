# =============================================================================
# fuego_core/ui/components.py
# Shared widgets for the reservation pages
# =============================================================================
from __future__ import annotations
import streamlit as st

from fuego_core.data.supabase_client import SCHEMA_SQL
from fuego_core.ui.theme import SUCCESS_COLOR, DANGER_COLOR

TOAST_ICONS = {"success": "✅", "error": "⚠️", "info": "ℹ️"}


def render_notifications(view_model) -> None:
    """Show queued view-model notifications as toasts."""
    for note in view_model.pop_notifications():
        st.toast(note.message, icon=TOAST_ICONS.get(note.kind, "ℹ️"))


def render_connection_badge(is_online: bool) -> None:
    color = SUCCESS_COLOR if is_online else DANGER_COLOR
    label = "Sistema Online" if is_online else "Sistema Offline"
    st.markdown(
        f"<span class='conn-badge'><span class='conn-dot' style='background:{color}'></span>"
        f"{label}</span>",
        unsafe_allow_html=True,
    )


def render_schema_help() -> None:
    """Remediation panel for a missing reservations table (managers only)."""
    with st.expander("⚠️ Tabela de reservas não encontrada no Supabase", expanded=True):
        st.write(
            "Rode o comando abaixo no **SQL Editor** do Supabase para corrigir. "
            "Enquanto isso, as reservas ficam salvas apenas neste dispositivo."
        )
        st.code(SCHEMA_SQL, language="sql")
