from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    supabase_url: str
    supabase_anon_key: str
    supabase_service_role_key: str = ""
    log_level: str = "INFO"
    featured_hotels_limit: int = 6
    request_timeout: float = 30.0
