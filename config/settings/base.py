"""
Django 기본 설정

모든 환경에서 공통으로 사용되는 설정입니다.
환경별 설정은 local.py, production.py, test.py에서 오버라이드합니다.
"""
import os
from pathlib import Path
import environ

# 환경 변수 로드
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ['localhost', '127.0.0.1']),
)

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# .env 파일 로드 (파일이 있을 경우만)
env_file = os.path.join(BASE_DIR, '.env')
if os.path.exists(env_file):
    environ.Env.read_env(env_file)

# 보안 키 (배포 환경에서는 환경변수로 설정 필요)
SECRET_KEY = env('SECRET_KEY', default='django-insecure-change-this-in-production')

# 디버그 모드
DEBUG = env('DEBUG')

# 허용된 호스트
ALLOWED_HOSTS = env('ALLOWED_HOSTS')


# ============================================================================
# 애플리케이션 정의
# ============================================================================

DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'rest_framework',
    'corsheaders',
]

LOCAL_APPS = [
    'apps.books',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS


# ============================================================================
# 미들웨어
# ============================================================================

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


# ============================================================================
# URL 설정
# ============================================================================

ROOT_URLCONF = 'config.urls'


# ============================================================================
# 템플릿 설정 (Admin, Browsable API)
# ============================================================================

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]


# ============================================================================
# WSGI/ASGI
# ============================================================================

WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'


# ============================================================================
# 데이터베이스
# ============================================================================

DATABASES = {
    'default': env.db('DATABASE_URL', default='sqlite:///db.sqlite3'),
}


# ============================================================================
# 비밀번호 유효성 검사
# ============================================================================

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {
            'min_length': 8,
        },
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


# ============================================================================
# 국제화
# ============================================================================

LANGUAGE_CODE = 'ko-kr'

TIME_ZONE = env('TIME_ZONE', default='Asia/Seoul')

USE_I18N = True

USE_TZ = True


# ============================================================================
# 정적 파일 (CSS, JavaScript, Images)
# ============================================================================

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# ============================================================================
# 미디어 파일 (업로드)
# ============================================================================

MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'


# ============================================================================
# 기본 기본키 필드 타입
# ============================================================================

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# ============================================================================
# 인증 설정 (Browsable API 로그인)
# ============================================================================

LOGIN_URL = 'rest_framework:login'
LOGIN_REDIRECT_URL = 'api-root'
LOGOUT_REDIRECT_URL = 'api-root'


# ============================================================================
# Django REST Framework
# ============================================================================

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ],
    # 조회는 누구나, 생성/수정/삭제는 로그인 사용자만
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticatedOrReadOnly',
    ],
    'DEFAULT_PAGINATION_CLASS': 'rest_framework.pagination.PageNumberPagination',
    'PAGE_SIZE': env.int('API_PAGE_SIZE', default=20),
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ],
    'EXCEPTION_HANDLER': 'config.exceptions.api_exception_handler',
}


# ============================================================================
# 도서 앱 설정
# ============================================================================

# 출판 연도로 허용할 미래 연도 범위 (올해 + N년)
BOOKS_MAX_PUBLISHED_YEAR_OFFSET = env.int('BOOKS_MAX_PUBLISHED_YEAR_OFFSET', default=1)


# ============================================================================
# CORS 설정
# ============================================================================

CORS_ALLOW_ALL_ORIGINS = DEBUG  # 개발 환경에서만 모든 출처 허용
