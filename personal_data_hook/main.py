from personal_data_hook.api.main import app

__all__ = ["app"]
