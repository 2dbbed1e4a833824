from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 대시보드 백엔드(collaborator) 주소
    BACKEND_BASE_URL: str = "http://hr-backend:8000"
    BACKEND_TIMEOUT: float = 5.0

    # HR 화면은 "all", 직원 화면은 "mine"
    LEAVE_REQUEST_SCOPE: str = "all"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
