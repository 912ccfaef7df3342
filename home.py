from __future__ import annotations

import streamlit as st

from core.config import get_settings
from core.session import get_ledger

st.title("🧾 Sales Recorder")
st.caption("Record retail sales with their location, then review the history.")

settings = get_settings()
ledger = get_ledger(settings.db_path)

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

with st.sidebar:
    st.subheader("Environment")
    st.write(f"**Data directory:** `{settings.data_dir}`")
    st.write(f"**Database:** `{settings.db_path.name}`")
    st.write(f"**Currency:** {settings.currency}")

st.metric("Sales recorded", len(ledger.list_all()))

c1, c2 = st.columns(2)
with c1:
    if st.button("New Sale", type="primary", use_container_width=True):
        st.switch_page("pages/1_🛒_New_Sale.py")
with c2:
    if st.button("Sales History", use_container_width=True):
        st.switch_page("pages/2_🧾_Sales_History.py")
