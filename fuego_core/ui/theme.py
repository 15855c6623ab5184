from html import escape

import streamlit as st

# === COLOR PALETTE ===
PRIMARY_COLOR    = "#ea580c"
SECONDARY_COLOR  = "#1c1917"
SUCCESS_COLOR    = "#10b981"
WARNING_COLOR    = "#f59e0b"
DANGER_COLOR     = "#ef4444"
TEXT_COLOR       = "#292524"
SUBTLE_TEXT      = "#78716c"
BACKGROUND_COLOR = "#fafaf9"
CARD_BG_LIGHT    = "#ffffff"

STATUS_COLORS = {
    "pending": WARNING_COLOR,
    "confirmed": SUCCESS_COLOR,
    "cancelled": DANGER_COLOR,
}


def apply_css():
    st.markdown(f"""
        <style>
        .main {{
            background-color: {BACKGROUND_COLOR};
            color: {TEXT_COLOR};
            font-family: 'Inter','Segoe UI',sans-serif;
        }}
        .main-header {{
            background: linear-gradient(135deg, {SECONDARY_COLOR} 0%, {PRIMARY_COLOR} 100%);
            padding: 2rem; border-radius: 16px; margin-bottom: 2rem; color: white;
        }}
        .status-pill {{
            display: inline-block; padding: 2px 12px; border-radius: 999px;
            font-size: 0.75rem; font-weight: 700; text-transform: uppercase;
        }}
        .conn-badge {{
            display: inline-flex; align-items: center; gap: 6px;
            padding: 4px 12px; border-radius: 999px; font-size: 0.8rem; font-weight: 600;
            background: {CARD_BG_LIGHT}; border: 1px solid #e7e5e4;
        }}
        .conn-dot {{ width: 8px; height: 8px; border-radius: 50%; }}
        </style>
    """, unsafe_allow_html=True)


def hero_card(title: str, subtitle: str):
    st.markdown(
        f"<div class='main-header'><h1>{title}</h1><p>{subtitle}</p></div>",
        unsafe_allow_html=True,
    )


def status_pill(status: str) -> str:
    color = STATUS_COLORS.get(status, SUBTLE_TEXT)
    return (
        f"<span class='status-pill' style='color:{color};border:1px solid {color}'>"
        f"{status}</span>"
    )


def reservation_card(reservation) -> str:
    """Markup for one reservation; guest-supplied fields are HTML-escaped."""
    return (
        f"**{escape(reservation.client_name)}** &nbsp; {status_pill(reservation.status.value)}<br>"
        f"{escape(reservation.date)} às {escape(reservation.time)} • {escape(reservation.pax)}"
    )
