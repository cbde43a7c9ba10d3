# routes/__init__.py

# HTTP routers mounted by main.create_app.
