# Services package init
"""
Blog Backend: Services Layer
==============================

What:  Storage calls sitting between routes (HTTP) and the database session.

Service Inventory:
    - PostService: list, get-by-id and insert on the posts table
"""
