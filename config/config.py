import os


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    return int(raw) if raw and raw.strip() else default


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "payroll-desk-secret"
    JWT_SECRET = os.environ.get("JWT_SECRET") or SECRET_KEY

    # DB
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = env_int("DB_PORT", 3306)
    DB_NAME = os.environ.get("DB_NAME", "payroll_desk")

    PORT = env_int("PORT", 5000)
    CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Auth
    OWNER_TOKEN_HOURS = env_int("OWNER_TOKEN_HOURS", 12)
    EMPLOYEE_TOKEN_DAYS = env_int("EMPLOYEE_TOKEN_DAYS", 30)
    OTP_TTL_SECONDS = env_int("OTP_TTL_SECONDS", 300)
    OTP_DELIVERY = os.environ.get("OTP_DELIVERY", "mail").lower()
    ALLOW_OWNER_REGISTRATION = env_bool("ALLOW_OWNER_REGISTRATION", True)

    # Mail (Flask-Mail)
    MAIL_SERVER = os.environ.get("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = env_int("MAIL_PORT", 587)
    MAIL_USE_TLS = env_bool("MAIL_USE_TLS", True)
    MAIL_USE_SSL = env_bool("MAIL_USE_SSL", False)
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME") or os.environ.get("EMAIL_USER", "")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD") or os.environ.get("EMAIL_PASS", "")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER") or MAIL_USERNAME

    # Dev helpers
    AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)
    AUTO_SEED_DB = env_bool("AUTO_SEED_DB", False)
    SEED_OWNER_EMAIL = os.environ.get("SEED_OWNER_EMAIL", "owner@example.com")
    SEED_OWNER_PASSWORD = os.environ.get("SEED_OWNER_PASSWORD", "owner123")

    DB_CONFIG = {
        "host": DB_HOST,
        "port": DB_PORT,
        "user": DB_USER,
        "password": DB_PASSWORD,
        "database": DB_NAME,
    }
