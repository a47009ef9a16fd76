"""
Routes package for the stub console.

This package contains route blueprints:
- api: JSON endpoints under /kylin/api
- views: HTML pages (login, main page with top bar, license dialog)
"""
