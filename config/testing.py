import os

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_desk_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
PORT = 5000
CORS_ORIGINS = "*"

OWNER_TOKEN_HOURS = 12
EMPLOYEE_TOKEN_DAYS = 30
OTP_TTL_SECONDS = 300
OTP_DELIVERY = "log"
OTP_BYPASS_CODE = "123456"
ALLOW_OWNER_REGISTRATION = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
SEED_OWNER_EMAIL = "owner@example.com"
SEED_OWNER_PASSWORD = "owner123"
