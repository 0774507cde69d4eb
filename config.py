import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./glamconnect.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")

    # Account & Profile Service backend: "local" (SQL store) or "supabase"
    ACCOUNT_BACKEND = data.get("ACCOUNT_BACKEND", "local")
    SUPABASE_URL = data.get("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = data.get("SUPABASE_ANON_KEY", "")
    BACKEND_TIMEOUT_SECONDS = float(data.get("BACKEND_TIMEOUT_SECONDS", 10.0))

    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 8))
    PASSWORD_REQUIRE_UPPERCASE = bool(data.get("PASSWORD_REQUIRE_UPPERCASE", True))
    PASSWORD_REQUIRE_LOWERCASE = bool(data.get("PASSWORD_REQUIRE_LOWERCASE", True))
    PASSWORD_REQUIRE_DIGIT = bool(data.get("PASSWORD_REQUIRE_DIGIT", True))
    PASSWORD_REQUIRE_SPECIAL = bool(data.get("PASSWORD_REQUIRE_SPECIAL", False))

    LOGIN_PATH = data.get("LOGIN_PATH", "/login")
    DASHBOARD_PATH = data.get("DASHBOARD_PATH", "/dashboard")
    ARTIST_REGISTRATION_PATH = data.get("ARTIST_REGISTRATION_PATH", "/register-artist")
