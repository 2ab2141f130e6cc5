"""
도서 모델 모듈

세 가지 뷰 스타일(APIView, GenericAPIView, ViewSet)이 공통으로 사용하는
도서(Book) 모델을 정의합니다.
"""
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Case, Value, When
from django.utils import timezone


class AvailabilityConflict(Exception):
    """expected 값이 DB에 저장된 대출 가능 여부와 다를 때"""


class BookQuerySet(models.QuerySet):
    """도서 쿼리셋"""

    def available(self):
        """대출 가능한 도서"""
        return self.filter(is_available=True)

    def checked_out(self):
        """대출 중인 도서"""
        return self.filter(is_available=False)


class Book(models.Model):
    """
    도서 모델

    제목, 저자, 출판 연도, 대출 가능 여부만 가지는 단순한 모델입니다.
    CRUD 동작은 모두 DRF 뷰 클래스가 처리합니다.
    """

    title = models.CharField('제목', max_length=200)
    author = models.CharField('저자', max_length=100)
    published_year = models.PositiveIntegerField(
        '출판 연도',
        validators=[MinValueValidator(1, message='1 이상의 연도를 입력하세요.')],
    )
    is_available = models.BooleanField('대출 가능 여부', default=True)

    created_at = models.DateTimeField('등록일시', auto_now_add=True)
    updated_at = models.DateTimeField('수정일시', auto_now=True)

    objects = BookQuerySet.as_manager()

    class Meta:
        db_table = 'books'
        verbose_name = '도서'
        verbose_name_plural = '도서 목록'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['title'], name='idx_book_title'),
            models.Index(fields=['author'], name='idx_book_author'),
            models.Index(fields=['is_available'], name='idx_book_is_available'),
        ]

    def __str__(self):
        return f"{self.title} ({self.author}, {self.published_year})"

    def toggle_availability(self, expected=None):
        """대출 가능 여부를 DB에서 조건부 UPDATE로 뒤집고 새 값을 반환한다.

        메모리의 값을 읽어서 저장하지 않으므로 동시에 들어온 토글이 서로를 덮어쓰지 않는다.
        expected가 주어지면 DB 값이 expected일 때만 뒤집고, 아니면 최신 값으로
        갱신한 뒤 AvailabilityConflict를 발생시킨다.
        """
        books = Book.objects.filter(pk=self.pk)
        now = timezone.now()
        if expected is None:
            flipped = Case(
                When(is_available=True, then=Value(False)),
                default=Value(True),
                output_field=models.BooleanField(),
            )
            updated = books.update(is_available=flipped, updated_at=now)
        else:
            updated = books.filter(is_available=expected).update(
                is_available=not expected, updated_at=now,
            )

        self.refresh_from_db(fields=['is_available', 'updated_at'])
        if not updated:
            raise AvailabilityConflict(self.is_available)
        return self.is_available
