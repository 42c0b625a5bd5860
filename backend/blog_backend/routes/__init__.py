# Routes package init
"""
Blog Backend: API Routes Package
==================================

Route Inventory:
    - posts.py:   GET  /api/posts          (list every post)
                  GET  /api/posts/{id}     (single post)
                  POST /api/posts          (create post)
    - health.py:  GET  /health             (service health check)

Routes stay thin: read the request, make one service call, return the result.
The HTML screens live in blog_backend.views.
"""
