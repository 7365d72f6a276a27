from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 4000
    openai_temperature: float = 0.7

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-5-20250929"

    llm_timeout_seconds: float = 60.0

    # Amadeus (flights and hotels)
    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_base_url: str = "https://test.api.amadeus.com"
    amadeus_timeout_seconds: float = 20.0
    amadeus_token_timeout_seconds: float = 15.0
    amadeus_token_margin_seconds: int = 60

    # Currency rates
    currency_base_url: str = "https://api.exchangerate-api.com/v4"
    currency_timeout_seconds: float = 5.0

    # NewsAPI
    news_api_key: str = ""
    news_base_url: str = "https://newsapi.org/v2"
    news_timeout_seconds: float = 10.0
    news_window_days: int = 30
    news_max_articles: int = 10

    # Hotel Search
    hotel_search_radius_km: int = 30
    hotel_offer_batch_size: int = 20
    hotel_list_fallback_size: int = 15

    # CORS
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:5500,http://localhost:5500"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
