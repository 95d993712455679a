"""Nearby transit stops: ranking, search and progressive disclosure."""
