"""
도서 시리얼라이저 모듈

DRF API용 시리얼라이저를 정의합니다.
세 가지 뷰 스타일 모두 같은 시리얼라이저를 사용합니다.
"""
from django.conf import settings
from django.utils import timezone
from rest_framework import serializers

from .models import Book


def max_published_year():
    """허용되는 최대 출판 연도 (올해 + BOOKS_MAX_PUBLISHED_YEAR_OFFSET)"""
    offset = getattr(settings, 'BOOKS_MAX_PUBLISHED_YEAR_OFFSET', 1)
    return timezone.localdate().year + offset


class BookSerializer(serializers.ModelSerializer):
    """도서 상세/생성/수정 시리얼라이저"""

    class Meta:
        model = Book
        fields = [
            'id', 'title', 'author', 'published_year', 'is_available',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('제목을 입력하세요.')
        return value

    def validate_author(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('저자를 입력하세요.')
        return value

    def validate_published_year(self, value):
        limit = max_published_year()
        if value > limit:
            raise serializers.ValidationError(f'출판 연도는 {limit}년 이하여야 합니다.')
        return value

    def validate(self, data):
        # 부분 수정(PATCH)일 때는 기존 값과 합쳐서 중복을 확인
        title = data.get('title', getattr(self.instance, 'title', None))
        author = data.get('author', getattr(self.instance, 'author', None))
        published_year = data.get('published_year', getattr(self.instance, 'published_year', None))

        duplicates = Book.objects.filter(
            title=title,
            author=author,
            published_year=published_year,
        )
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError('같은 제목, 저자, 출판 연도의 도서가 이미 등록되어 있습니다.')
        return data


class BookListSerializer(serializers.ModelSerializer):
    """도서 목록용 시리얼라이저 (간단한 정보만)"""

    class Meta:
        model = Book
        fields = ['id', 'title', 'author', 'published_year', 'is_available']


class BookToggleSerializer(serializers.ModelSerializer):
    """대출 가능 여부 토글 시리얼라이저

    요청 본문의 expected(선택)는 호출자가 알고 있는 현재 is_available 값입니다.
    응답에는 id, title, 변경된 is_available만 담깁니다.
    """
    expected = serializers.BooleanField(allow_null=True, default=None, write_only=True)

    class Meta:
        model = Book
        fields = ['id', 'title', 'is_available', 'expected']
        read_only_fields = ['id', 'title', 'is_available']


class BookStatsSerializer(serializers.Serializer):
    """도서 통계 응답"""
    total = serializers.IntegerField()
    available = serializers.IntegerField()
    checked_out = serializers.IntegerField()
