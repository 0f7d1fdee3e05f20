from pydantic_settings import BaseSettings

DEFAULT_IRRELEVANT_MARKERS = [
    "does not provide any information",
    "is not about",
    "no relevant information",
    "unrelated to the question",
    "has nothing to do with",
    "not relevant to the question",
    "irrelevant to the question",
]


class Settings(BaseSettings):
    # Search provider
    search_provider: str = "google"  # google | brave | tavily
    google_api_key: str = ""
    google_cse_id: str = ""
    brave_api_key: str = ""
    tavily_api_key: str = ""
    search_fallback_to_tavily: bool = False
    search_max_results: int = 10
    search_timeout_seconds: float = 15.0

    # Reddit (script app credentials)
    reddit_client_id: str = ""
    reddit_client_secret: str = ""
    reddit_username: str = ""
    reddit_password: str = ""
    reddit_user_agent: str = ""
    reddit_auth_url: str = "https://www.reddit.com/api/v1/access_token"
    reddit_api_base: str = "https://oauth.reddit.com"
    reddit_timeout_seconds: float = 15.0

    # LLM (OpenAI-compatible, Groq by default)
    llm_api_key: str = ""
    llm_base_url: str = "https://api.groq.com/openai/v1"
    default_model: str = "llama-3.3-70b-versatile"
    summary_model: str = ""  # optional override for per-thread summaries
    synthesis_model: str = ""  # optional override for the final answer
    summary_max_tokens: int = 200
    summary_temperature: float = 0.4
    synthesis_max_tokens: int = 600
    synthesis_temperature: float = 0.6
    llm_timeout_seconds: float = 30.0
    llm_max_retries: int = 0

    # Pipeline limits
    max_threads: int = 5
    max_comments_per_thread: int = 3
    thread_max_parallel: int = 5
    irrelevant_summary_markers: list[str] = list(DEFAULT_IRRELEVANT_MARKERS)

    # Confidence heuristic
    confidence_base: int = 50
    confidence_increment: int = 10
    confidence_ceiling: int = 95
    confidence_no_relevant: int = 15

    # App
    cors_origins: str = "http://localhost:3000"
    app_log_level: str = "INFO"
    noisy_log_level: str = "WARNING"
    log_dir: str = "logs"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def reddit_agent(self) -> str:
        if self.reddit_user_agent.strip():
            return self.reddit_user_agent.strip()
        return f"Reddit-Summarizer-App/0.1 by {self.reddit_username or 'UnknownUser'}"

    def missing_credentials(self) -> list[str]:
        """Names of required credentials that are not configured."""
        required: dict[str, str] = {}
        provider = self.search_provider.lower().strip()
        if provider == "google":
            required["GOOGLE_API_KEY"] = self.google_api_key
            required["GOOGLE_CSE_ID"] = self.google_cse_id
        elif provider == "brave":
            required["BRAVE_API_KEY"] = self.brave_api_key
        elif provider == "tavily":
            required["TAVILY_API_KEY"] = self.tavily_api_key
        else:
            # Unknown provider: report the setting itself as unusable.
            required["SEARCH_PROVIDER"] = ""
        if provider != "tavily" and self.search_fallback_to_tavily:
            required["TAVILY_API_KEY"] = self.tavily_api_key

        required["REDDIT_CLIENT_ID"] = self.reddit_client_id
        required["REDDIT_CLIENT_SECRET"] = self.reddit_client_secret
        required["REDDIT_USERNAME"] = self.reddit_username
        required["REDDIT_PASSWORD"] = self.reddit_password
        required["LLM_API_KEY"] = self.llm_api_key

        return [name for name, value in required.items() if not value.strip()]


settings = Settings()
