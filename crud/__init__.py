# crud/__init__.py

# Database access helpers, one module per table.
