import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
DB_CONFIG = Config.DB_CONFIG

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
PORT = Config.PORT
CORS_ORIGINS = Config.CORS_ORIGINS

OWNER_TOKEN_HOURS = Config.OWNER_TOKEN_HOURS
EMPLOYEE_TOKEN_DAYS = Config.EMPLOYEE_TOKEN_DAYS
OTP_TTL_SECONDS = Config.OTP_TTL_SECONDS
OTP_DELIVERY = Config.OTP_DELIVERY
# Never honoured outside testing
OTP_BYPASS_CODE = None
ALLOW_OWNER_REGISTRATION = Config.ALLOW_OWNER_REGISTRATION

MAIL_SERVER = Config.MAIL_SERVER
MAIL_PORT = Config.MAIL_PORT
MAIL_USE_TLS = Config.MAIL_USE_TLS
MAIL_USE_SSL = Config.MAIL_USE_SSL
MAIL_USERNAME = Config.MAIL_USERNAME
MAIL_PASSWORD = Config.MAIL_PASSWORD
MAIL_DEFAULT_SENDER = Config.MAIL_DEFAULT_SENDER

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
SEED_OWNER_EMAIL = Config.SEED_OWNER_EMAIL
SEED_OWNER_PASSWORD = Config.SEED_OWNER_PASSWORD
