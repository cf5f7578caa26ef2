"""
HTTP routes. Routers are included by main.create_app():
- /api: health, users, chirps
- /admin: metrics, reset
"""
