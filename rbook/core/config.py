from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "rbook-quizzes"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    QUIZ_EXTRA_DIR: str = ""
    ANSWER_KEY_TITLE: str = "Answer Key"


settings = Settings()
