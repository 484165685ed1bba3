"""
Utility modules for the tastemongers app.

- validation: email validation shared by the API and the client layer
- database: one-shot database configuration resolution
- formatting: star bars, prices and blog excerpts
"""
