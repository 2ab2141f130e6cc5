"""
API 예외 처리 모듈

DRF 기본 예외 핸들러를 감싸서 응답 형식을 통일합니다.
"""
import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """DRF 예외 응답에 status_code를 추가한다.

    - dict 응답: status_code 키를 추가
    - list/str 응답 (예: serializer 의 non-field 오류): {'detail': ...} 로 감싼다
    DRF가 처리하지 못한 예외(None 반환)는 그대로 Django로 전파된다.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(response.data, dict):
        response.data['status_code'] = response.status_code
    else:
        response.data = {
            'detail': response.data,
            'status_code': response.status_code,
        }

    view = context.get('view')
    logger.debug(
        'API 예외 처리: %s (%s) view=%s',
        exc.__class__.__name__, response.status_code,
        view.__class__.__name__ if view else '-',
    )
    return response
