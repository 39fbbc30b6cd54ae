"""
Restaurant search.

Responsibilities:
- Prefilter the catalog to a bounded candidate set for a free-text query.
- Score candidates with deterministic relevance heuristics.
- Filter by a minimum score, order by relevance and truncate.
- Let callers discard results from superseded searches.
"""
