# client/streamlit_app.py
import os
import streamlit as st
import api as API
from components import show_observation, show_error

st.set_page_config(page_title="Bond Yields Client", layout="wide")
st.title("Bank of Canada bond yields")

st.markdown("""
Look up the published Government of Canada bond yields for a day.
Dates can be written `2022-05-24`, `24/05/2022`, `5\\24\\2022`, ...
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            st.success(API.healthz())
        except Exception as e:
            st.error(f"Health check failed: {e}")

tab1, tab2 = st.tabs(["Lookup", "Group"])

with tab1:
    date = st.text_input("Date", placeholder="2022-05-24")
    if st.button("Fetch observation", key="btn_fetch_obs") and date:
        try:
            norm = API.normalize(date)
            st.write(f"Normalized: `{norm['date']}`")
            show_observation(API.observation(date), API.series())
        except Exception as e:
            show_error(e)

with tab2:
    if st.button("Fetch group details", key="btn_fetch_group"):
        try:
            st.json(API.group())
            st.json(API.terms())
            st.write(f"{len(API.dates())} dates available")
        except Exception as e:
            show_error(e)
