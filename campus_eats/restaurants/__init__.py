"""
Restaurant catalog.

Responsibilities:
- Load the bundled restaurant, category and rating tables into memory.
- Map catalog rows into API models and search candidates.
- Aggregate restaurant details (categories, average user rating).
- Filter restaurants by category for the map view.
"""
