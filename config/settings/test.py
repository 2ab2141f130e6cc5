"""
테스트 환경 설정

pytest-django가 사용하는 설정입니다. (pyproject.toml 참고)
인메모리 SQLite와 빠른 비밀번호 해셔로 테스트 속도를 높입니다.
"""
from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# 페이지 크기를 고정해서 페이지네이션 테스트가 환경변수에 흔들리지 않게 함
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'PAGE_SIZE': 20,
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

BOOKS_MAX_PUBLISHED_YEAR_OFFSET = 1

# 테스트 중에는 경고 이상만 출력
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}
