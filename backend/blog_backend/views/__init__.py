# Views package init
"""
Blog Backend: HTML View Layer
===============================

What:  Server-rendered screens that consume the posts API over HTTP.

Module Inventory:
    - client.py:  PostsClient (httpx) and its FastAPI dependency
    - pages.py:   list, detail and create-form handlers plus the Jinja2 environment
"""
