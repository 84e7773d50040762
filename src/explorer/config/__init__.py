from explorer.config.settings import ConnectionSettings, IndexSettings, ObservabilitySettings, Settings

__all__ = ["ConnectionSettings", "IndexSettings", "ObservabilitySettings", "Settings"]
