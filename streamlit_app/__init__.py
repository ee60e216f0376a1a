"""Streamlit front end for the video generator."""
