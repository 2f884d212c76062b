"""
Quotes API - Services Layer
============================

Service Inventory:
    - QuoteService:  CRUD over the quotes table (quote_service.py)
    - svg_renderer:  Pure functions that lay out and render a quote card

Routes stay thin: they parse the request, call a service and shape the
response envelope.
"""
