"""
환경 설정 및 구성 관리
"""

import os
from dotenv import load_dotenv

from ..catalog import OUTLINES, normalize_name

# 환경 변수 로드
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 목차 설정
    DEFAULT_OUTLINE = os.getenv("DEFAULT_OUTLINE", "jquery")

    # 내보내기 설정
    JSON_INDENT = int(os.getenv("JSON_INDENT", "2"))
    OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")

    # 검색 설정
    DEFAULT_SEARCH_LIMIT = int(os.getenv("DEFAULT_SEARCH_LIMIT", "10"))

    @property
    def log_level(self):
        """로그 레벨"""
        return self.LOG_LEVEL.upper()

    @property
    def default_outline(self):
        """기본 목차 이름"""
        return self.DEFAULT_OUTLINE

    @property
    def json_indent(self):
        return self.JSON_INDENT

    @property
    def output_dir(self):
        """내보내기 디렉토리"""
        return self.OUTPUT_DIR

    @property
    def default_search_limit(self):
        return self.DEFAULT_SEARCH_LIMIT

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL은 {', '.join(LOG_LEVELS)} 중 하나여야 합니다."
            )

        if normalize_name(cls.DEFAULT_OUTLINE) not in OUTLINES:
            errors.append(
                f"DEFAULT_OUTLINE은 {', '.join(OUTLINES)} 중 하나여야 합니다."
            )

        if cls.JSON_INDENT < 0:
            errors.append("JSON_INDENT는 0 이상이어야 합니다.")

        if not cls.OUTPUT_DIR:
            errors.append("OUTPUT_DIR이 설정되지 않았습니다.")

        if cls.DEFAULT_SEARCH_LIMIT <= 0:
            errors.append("DEFAULT_SEARCH_LIMIT는 0보다 커야 합니다.")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  기본 목차: {cls.DEFAULT_OUTLINE}")
        print(f"  JSON 들여쓰기: {cls.JSON_INDENT}")
        print(f"  내보내기 디렉토리: {cls.OUTPUT_DIR}")
        print(f"  기본 검색 제한: {cls.DEFAULT_SEARCH_LIMIT}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
