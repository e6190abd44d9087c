"""Utility helpers for carbon2html."""
