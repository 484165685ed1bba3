"""
Public JSON API for the TasteMongers site.

Serves the ratings catalog, the blog and the newsletter signup. All
endpoints are anonymous; the subscribe endpoint is rate limited.
"""
