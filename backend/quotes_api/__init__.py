"""
Quotes API - Application Package
=================================

What:  HTTP service for storing quotes and rendering them as SVG cards.
How:   Layered the same way throughout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (CRUD + SVG rendering)   │  ← validation, layout
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The SVG renderer is a pure function and does not touch the database;
    routes fetch a quote through the quote service and hand it over.
"""

__version__ = "1.0.0"
