"""
도서 API 뷰 모듈

같은 도서 CRUD를 세 가지 DRF 뷰 스타일로 나란히 구현합니다.
    1. APIView                 - HTTP 메서드(get/post/put/patch/delete)를 직접 처리
    2. GenericAPIView + Mixin  - list/create/retrieve/update/destroy를 Mixin에 위임
       (Concrete 제네릭 뷰)     - ListCreateAPIView, RetrieveUpdateDestroyAPIView
    3. ViewSet / ModelViewSet  - 액션만 정의하고 URL은 Router가 생성

엔드포인트:
    /api/apiview/books/[<pk>/[toggle/]]  - APIView
    /api/generic/books/[<pk>/[toggle/]]  - GenericAPIView + Mixin
    /api/concrete/books/[<pk>/]          - Concrete 제네릭 뷰
    /api/books/...                       - ModelViewSet (+ Router)
    /api/catalog/...                     - ReadOnlyModelViewSet
    /api/styles/                         - 스타일 비교표
"""
import logging

from django.db.models import Q
from django.http import Http404
from rest_framework import filters, generics, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.settings import api_settings
from rest_framework.views import APIView

from .models import AvailabilityConflict, Book
from .serializers import (
    BookSerializer, BookListSerializer, BookToggleSerializer, BookStatsSerializer
)

logger = logging.getLogger(__name__)

TRUE_VALUES = {'true', '1', 'yes'}
FALSE_VALUES = {'false', '0', 'no'}


# ============================================================================
# 공통 도우미
# ============================================================================

def parse_bool_param(params, name):
    """쿼리 파라미터를 bool로 변환한다. 없으면 None."""
    raw = params.get(name)
    if raw is None or raw == '':
        return None
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValidationError({name: f'true 또는 false 값이어야 합니다. (입력값: {raw})'})


def filter_by_availability(queryset, params):
    """?is_available=true|false 필터"""
    is_available = parse_bool_param(params, 'is_available')
    if is_available is None:
        return queryset
    return queryset.filter(is_available=is_available)


def search_books(queryset, params):
    """?search= 제목/저자 부분 일치 검색 (APIView 스타일에서 직접 사용)"""
    search = params.get('search', '').strip()
    if not search:
        return queryset
    return queryset.filter(
        Q(title__icontains=search) |
        Q(author__icontains=search)
    )


def toggle_book(book, request):
    """대출 가능 여부를 토글하고 응답을 만든다.

    요청 본문에 expected가 있고 DB 값과 다르면 400을 반환하고 아무것도 바꾸지 않는다.
    """
    serializer = BookToggleSerializer(book, data=request.data)
    serializer.is_valid(raise_exception=True)
    expected = serializer.validated_data.get('expected')

    try:
        book.toggle_availability(expected=expected)
    except Book.DoesNotExist:
        # 조회 후 토글 전에 삭제된 경우
        raise Http404
    except AvailabilityConflict:
        logger.warning(
            '도서 토글 거부: pk=%s expected=%s current=%s',
            book.pk, expected, book.is_available,
        )
        return Response(
            {
                'error': '도서 상태가 이미 변경되었습니다. 새로고침 후 다시 시도하세요.',
                'is_available': book.is_available,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    logger.info('도서 토글: pk=%s is_available=%s', book.pk, book.is_available)
    return Response(BookToggleSerializer(book).data)


class BookFilterMixin:
    """제네릭 뷰/ViewSet 공통 queryset 및 필터 설정"""
    queryset = Book.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['title', 'author']
    ordering_fields = ['title', 'published_year', 'created_at']

    def get_queryset(self):
        """?is_available= 필터 적용"""
        queryset = super().get_queryset()
        return filter_by_availability(queryset, self.request.query_params)


class BookLoggingMixin:
    """생성/수정/삭제 로그"""

    def perform_create(self, serializer):
        book = serializer.save()
        logger.info('도서 등록(%s): pk=%s', self.__class__.__name__, book.pk)

    def perform_update(self, serializer):
        book = serializer.save()
        logger.info('도서 수정(%s): pk=%s', self.__class__.__name__, book.pk)

    def perform_destroy(self, instance):
        book_pk = instance.pk
        instance.delete()
        logger.info('도서 삭제(%s): pk=%s', self.__class__.__name__, book_pk)


# ============================================================================
# 스타일 1: APIView
# ============================================================================

class BookObjectMixin:
    """pk로 도서를 찾고 없으면 404"""

    def get_object(self, pk):
        try:
            return Book.objects.get(pk=pk)
        except Book.DoesNotExist:
            raise Http404


class BookListAPIView(APIView):
    """도서 목록 조회 / 등록"""

    def get(self, request):
        books = Book.objects.all()
        books = search_books(books, request.query_params)
        books = filter_by_availability(books, request.query_params)

        # 페이지네이션도 직접 호출해야 한다
        paginator = api_settings.DEFAULT_PAGINATION_CLASS()
        page = paginator.paginate_queryset(books, request, view=self)
        if page is not None:
            serializer = BookSerializer(page, many=True)
            return paginator.get_paginated_response(serializer.data)

        serializer = BookSerializer(books, many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = BookSerializer(data=request.data)
        if serializer.is_valid():
            book = serializer.save()
            logger.info('도서 등록(APIView): pk=%s', book.pk)
            return Response(serializer.data, status=status.HTTP_201_CREATED)

        logger.warning('도서 등록 검증 실패(APIView): %s', serializer.errors)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


class BookDetailAPIView(BookObjectMixin, APIView):
    """도서 상세 조회 / 수정 / 삭제"""

    def get(self, request, pk):
        book = self.get_object(pk)
        serializer = BookSerializer(book)
        return Response(serializer.data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def delete(self, request, pk):
        book = self.get_object(pk)
        book_pk = book.pk
        book.delete()
        logger.info('도서 삭제(APIView): pk=%s', book_pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, pk, partial):
        book = self.get_object(pk)
        serializer = BookSerializer(book, data=request.data, partial=partial)
        if serializer.is_valid():
            serializer.save()
            logger.info('도서 수정(APIView): pk=%s partial=%s', book.pk, partial)
            return Response(serializer.data)

        logger.warning('도서 수정 검증 실패(APIView): pk=%s %s', book.pk, serializer.errors)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


class BookToggleAPIView(BookObjectMixin, APIView):
    """대출 가능 여부 토글"""

    def post(self, request, pk):
        return toggle_book(self.get_object(pk), request)


# ============================================================================
# 스타일 2: GenericAPIView + Mixin
# ============================================================================

class BookListCreateGenericView(BookFilterMixin,
                                BookLoggingMixin,
                                mixins.ListModelMixin,
                                mixins.CreateModelMixin,
                                generics.GenericAPIView):
    """도서 목록 조회 / 등록 (Mixin 조합)"""
    serializer_class = BookSerializer

    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)

    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)


class BookDetailGenericView(BookFilterMixin,
                            BookLoggingMixin,
                            mixins.RetrieveModelMixin,
                            mixins.UpdateModelMixin,
                            mixins.DestroyModelMixin,
                            generics.GenericAPIView):
    """도서 상세 조회 / 수정 / 삭제 (Mixin 조합)"""
    serializer_class = BookSerializer

    def get(self, request, *args, **kwargs):
        return self.retrieve(request, *args, **kwargs)

    def put(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def patch(self, request, *args, **kwargs):
        return self.partial_update(request, *args, **kwargs)

    def delete(self, request, *args, **kwargs):
        return self.destroy(request, *args, **kwargs)


class BookToggleGenericView(BookFilterMixin, generics.GenericAPIView):
    """대출 가능 여부 토글 (get_object만 GenericAPIView에서 빌려 씀)"""
    serializer_class = BookToggleSerializer

    def post(self, request, *args, **kwargs):
        return toggle_book(self.get_object(), request)


class BookListCreateView(BookFilterMixin, BookLoggingMixin, generics.ListCreateAPIView):
    """도서 목록 조회 / 등록 (ListCreateAPIView)"""
    serializer_class = BookSerializer


class BookRetrieveUpdateDestroyView(BookFilterMixin, BookLoggingMixin,
                                    generics.RetrieveUpdateDestroyAPIView):
    """도서 상세 조회 / 수정 / 삭제 (RetrieveUpdateDestroyAPIView)"""
    serializer_class = BookSerializer


# ============================================================================
# 스타일 3: ViewSet / ModelViewSet
# ============================================================================

class BookViewSet(BookFilterMixin, BookLoggingMixin, viewsets.ModelViewSet):
    """
    도서 API ViewSet

    엔드포인트:
        GET    /api/books/              - 도서 목록
        POST   /api/books/              - 도서 등록
        GET    /api/books/<pk>/         - 도서 상세
        PUT    /api/books/<pk>/         - 도서 전체 수정
        PATCH  /api/books/<pk>/         - 도서 부분 수정
        DELETE /api/books/<pk>/         - 도서 삭제
        POST   /api/books/<pk>/toggle/  - 대출 가능 여부 토글
        GET    /api/books/available/    - 대출 가능한 도서 목록
        GET    /api/books/stats/        - 도서 통계
    """

    def get_serializer_class(self):
        """액션에 따른 시리얼라이저 선택"""
        if self.action in ['list', 'available']:
            return BookListSerializer
        elif self.action == 'toggle':
            return BookToggleSerializer
        elif self.action == 'stats':
            return BookStatsSerializer
        return BookSerializer

    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """대출 가능 여부 토글"""
        return toggle_book(self.get_object(), request)

    @action(detail=False, methods=['get'])
    def available(self, request):
        """대출 가능한 도서 목록"""
        queryset = self.filter_queryset(self.get_queryset()).available()

        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def stats(self, request):
        """도서 통계"""
        books = Book.objects.all()
        serializer = self.get_serializer({
            'total': books.count(),
            'available': books.available().count(),
            'checked_out': books.checked_out().count(),
        })
        return Response(serializer.data)


class BookReadOnlyViewSet(BookFilterMixin, viewsets.ReadOnlyModelViewSet):
    """
    읽기 전용 도서 ViewSet

    list / retrieve만 제공하므로 Router는 쓰기 URL을 만들지 않습니다.
        GET /api/catalog/       - 도서 목록
        GET /api/catalog/<pk>/  - 도서 상세
    """

    def get_serializer_class(self):
        if self.action == 'list':
            return BookListSerializer
        return BookSerializer


# ============================================================================
# 스타일 비교표
# ============================================================================

VIEW_STYLES = [
    {
        'style': 'APIView',
        'base_class': 'rest_framework.views.APIView',
        'code_amount': '많음',
        'url_wiring': 'path()로 직접 연결',
        'suited_for': 'CRUD 형태가 아닌 로직, 흐름을 전부 제어해야 할 때',
        'list_url_name': 'apiview-book-list',
    },
    {
        'style': 'GenericAPIView + Mixin',
        'base_class': 'rest_framework.generics.GenericAPIView',
        'code_amount': '중간',
        'url_wiring': 'path()로 직접 연결',
        'suited_for': 'CRUD 중 일부만 필요할 때',
        'list_url_name': 'generic-book-list',
    },
    {
        'style': 'Concrete Generic View',
        'base_class': 'rest_framework.generics.ListCreateAPIView',
        'code_amount': '적음',
        'url_wiring': 'path()로 직접 연결',
        'suited_for': '목록/상세 URL을 나눠서 표준 CRUD를 빠르게 만들 때',
        'list_url_name': 'concrete-book-list',
    },
    {
        'style': 'ViewSet',
        'base_class': 'rest_framework.viewsets.ModelViewSet',
        'code_amount': '가장 적음',
        'url_wiring': 'Router가 자동 생성',
        'suited_for': '모델 하나에 대한 표준 CRUD 전체',
        'list_url_name': 'book-list',
    },
]


class ViewStyleCatalogView(APIView):
    """GET /api/styles/ - 뷰 스타일 비교표 (list_url은 등록된 URL 이름에서 계산)"""
    permission_classes = [AllowAny]

    def get(self, request):
        styles = []
        for item in VIEW_STYLES:
            entry = {key: value for key, value in item.items() if key != 'list_url_name'}
            entry['list_url'] = reverse(item['list_url_name'], request=request)
            styles.append(entry)
        return Response({'count': len(styles), 'styles': styles})
