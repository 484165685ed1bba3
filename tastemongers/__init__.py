"""
TasteMongers Django application.

This app serves the expert cheese ratings catalog, the blog and the
newsletter signup for the TasteMongers site.
"""
