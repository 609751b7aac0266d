import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables from .env (only for local development)
if os.getenv("FLASK_ENV") != "production":
    load_dotenv()


class Config:
    """Base configuration."""

    # General settings
    SECRET_KEY = os.getenv("SECRET_KEY", "default-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///mentorhub.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tokens are signed HS256 and carry the account email as identity
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "default-jwt-secret-key")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=int(os.getenv("JWT_EXPIRES_IN_DAYS", 7)))

    # Fixed bcrypt work factor
    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", 10))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

    # CORS configuration
    CORS_ORIGINS = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()
    ]

    # Debug mode
    DEBUG = os.getenv("FLASK_ENV") != "production"


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-enough-bytes"
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = "WARNING"
