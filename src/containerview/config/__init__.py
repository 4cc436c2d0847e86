from containerview.config.settings import config

__all__ = ["config"]
