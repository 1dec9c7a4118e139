from services.word_frontend_service.implementations.static_asset_store import StaticAssetStore

__all__ = ["StaticAssetStore"]
