"""
데이터 모델 모듈

SQLModel 테이블 모델들을 정의합니다.
데이터베이스 테이블 구조를 정의합니다.
"""
from devmatching.models.user import User

__all__ = ["User"]
