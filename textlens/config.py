from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAIConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TEXTLENS_OPENAI__",
        env_file=".env",
        extra="ignore",
    )

    # Empty means "not configured"; checked once at startup.
    api_key: str = ""
    # Set to an Azure OpenAI endpoint to use AsyncAzureOpenAI instead of AsyncOpenAI.
    endpoint: str = ""
    api_version: str = "2024-12-01-preview"
    model: str = "gpt-4o-mini"
    temperature: float = 0.2
    max_tokens: int = 8192

    @property
    def is_azure(self) -> bool:
        return bool(self.endpoint)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    openai: OpenAIConfig = OpenAIConfig()


settings = Settings()
