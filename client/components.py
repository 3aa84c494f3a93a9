# client/components.py
import streamlit as st
import pandas as pd

def show_observation(obs: dict, series: dict | None = None):
    """Render one observation as a (series, label, value) table."""
    rows = []
    for key, val in obs.items():
        if key == "d":
            continue
        label = (series or {}).get(key, {}).get("label", "")
        rows.append({"series": key, "label": label, "value": (val or {}).get("v", "")})
    st.caption(f"Observation for {obs.get('d')}")
    st.dataframe(pd.DataFrame(rows))

def show_error(e: Exception):
    """Show the API's error detail when there is one."""
    resp = getattr(e, "response", None)
    if resp is not None:
        try:
            st.error(resp.json().get("detail", resp.text))
            return
        except ValueError:
            pass
    st.error(e)
