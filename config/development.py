import os

from config.config import Config, env_bool

SECRET_KEY = Config.SECRET_KEY
JWT_SECRET = Config.JWT_SECRET
DB_CONFIG = Config.DB_CONFIG

DEBUG = True
LOG_LEVEL = Config.LOG_LEVEL
PORT = Config.PORT
CORS_ORIGINS = Config.CORS_ORIGINS

OWNER_TOKEN_HOURS = Config.OWNER_TOKEN_HOURS
EMPLOYEE_TOKEN_DAYS = Config.EMPLOYEE_TOKEN_DAYS
OTP_TTL_SECONDS = Config.OTP_TTL_SECONDS
ALLOW_OWNER_REGISTRATION = Config.ALLOW_OWNER_REGISTRATION
# Codes go to the log unless mail is switched on explicitly
OTP_DELIVERY = os.environ.get("OTP_DELIVERY", "log").lower()
OTP_BYPASS_CODE = None

MAIL_SERVER = Config.MAIL_SERVER
MAIL_PORT = Config.MAIL_PORT
MAIL_USE_TLS = Config.MAIL_USE_TLS
MAIL_USE_SSL = Config.MAIL_USE_SSL
MAIL_USERNAME = Config.MAIL_USERNAME
MAIL_PASSWORD = Config.MAIL_PASSWORD
MAIL_DEFAULT_SENDER = Config.MAIL_DEFAULT_SENDER

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", True)
# Optional: also seed the demo owner and holidays on startup
AUTO_SEED_DB = Config.AUTO_SEED_DB
SEED_OWNER_EMAIL = Config.SEED_OWNER_EMAIL
SEED_OWNER_PASSWORD = Config.SEED_OWNER_PASSWORD
