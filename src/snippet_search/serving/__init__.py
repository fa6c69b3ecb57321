"""
Serving — MCP tool server and health check behind one FastAPI app.

Run with ``python -m snippet_search.serving``.
"""
