"""Streamlit front end for Connect Four."""
