from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    OPENAI_API_KEY: str
    SUPABASE_URL: str
    SUPABASE_API_KEY: str


class PipelineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="PIPELINE_", extra="ignore")

    embedding_model: str = "text-embedding-3-small"
    embedding_dimensions: int = 1536

    chat_model: str = "gpt-4"
    temperature: float = 0.8
    frequency_penalty: float = 0.7

    match_function: str = "match_movies"
    match_threshold: float = 0.01
    match_count: int = 1
    request_timeout: float = 20.0  # seconds, similarity search only
