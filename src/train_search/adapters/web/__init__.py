"""Web adapter exposing train search over HTTP."""

from train_search.adapters.web.starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
