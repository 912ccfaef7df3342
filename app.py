from __future__ import annotations

import logging

import streamlit as st

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)

st.set_page_config(page_title="Sales Recorder", page_icon="🧾", layout="centered")

pages = [
    st.Page("home.py", title="Welcome", icon="🏠", default=True),
    st.Page("pages/1_🛒_New_Sale.py", title="New Sale", icon="🛒", url_path="new_sale"),
    st.Page("pages/2_🧾_Sales_History.py", title="Sales History", icon="🧾", url_path="sales"),
    st.Page("pages/3_🧪_Data_Management.py", title="Data Management", icon="🧪", url_path="data"),
]

st.navigation(pages).run()
