import os

from dotenv import load_dotenv

load_dotenv()


def _csv(value):
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Base configuration"""
    APP_NAME = os.environ.get('APP_NAME') or 'payoff'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Browser origins allowed to call /api
    CORS_ORIGINS = _csv(os.environ.get('CORS_ORIGINS') or 'http://localhost:5173,http://127.0.0.1:5173')

    # Allocation heuristics
    ALLOCATION_SMALL_BUDGET_THRESHOLD = float(os.environ.get('ALLOCATION_SMALL_BUDGET_THRESHOLD') or 100)
    ALLOCATION_CONTENTION_BAND = float(os.environ.get('ALLOCATION_CONTENTION_BAND') or 0.85)
    REFERENCE_TEST_PAYMENT = float(os.environ.get('REFERENCE_TEST_PAYMENT') or 1000)

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'DEBUG'

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'WARNING'

config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
