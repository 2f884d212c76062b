"""
Quotes API - API Routes Package
================================

Route Inventory:
    - root.py:    GET  /                       (welcome document)
    - quotes.py:  GET  /quotes                 (list)
                  GET  /quotes/random          (random quote)
                  GET  /quotes/random/svg      (random quote card)
                  GET  /quotes/{id}            (single quote)
                  GET  /quotes/{id}/svg        (quote card)
                  POST /quotes                 (create, password)
                  PUT  /quotes/{id}            (update, password)
                  DELETE /quotes/{id}          (delete, password)
    - health.py:  GET  /health                 (service health check)
"""
