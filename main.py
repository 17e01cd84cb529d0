#!/usr/bin/env python3
"""
가이드 목차 카탈로그 통합 실행 스크립트
"""

import sys
import argparse
import logging
from pathlib import Path

from guide_outlines import (
    Config,
    validate_config,
    OutlineSearch,
    SearchType,
    list_outlines,
    get_outline,
    dumps,
    save_outline,
    read_outline,
    outline_statistics,
    format_outline,
    format_search_results,
    format_statistics,
)

logger = logging.getLogger(__name__)


def list_command(args):
    """등록된 목차 목록 명령"""
    try:
        for name in list_outlines():
            outline = get_outline(name)
            print(f"📚 {name:<10} {outline.title} ({len(outline)}개 섹션)")
    except Exception as e:
        logger.error(f"목차 목록 조회 중 오류 발생: {e}")
        return 1
    return 0


def show_command(args):
    """목차 출력 명령"""
    try:
        outline = get_outline(args.name or Config.DEFAULT_OUTLINE)

        if args.format == "json":
            print(dumps(outline, indent=Config.JSON_INDENT))
        else:
            print(format_outline(outline))

    except Exception as e:
        logger.error(f"목차 출력 중 오류 발생: {e}")
        return 1
    return 0


def export_command(args):
    """목차 JSON 내보내기 명령"""
    try:
        outline = get_outline(args.name or Config.DEFAULT_OUTLINE)
        output = args.output or Path(Config.OUTPUT_DIR) / f"{outline.name}.json"
        indent = args.indent if args.indent is not None else Config.JSON_INDENT

        path = save_outline(outline, output, indent=indent)
        print(f"✅ 목차를 내보냈습니다: {path}")

    except Exception as e:
        logger.error(f"목차 내보내기 중 오류 발생: {e}")
        return 1
    return 0


def validate_command(args):
    """목차 JSON 파일 검사 명령"""
    try:
        if not Path(args.path).exists():
            print(f"❌ 파일을 찾을 수 없습니다: {args.path}")
            return 1

        outline = read_outline(args.path, allow_groups=not args.no_groups)
        print(f"✅ 올바른 목차입니다: {args.path} ({len(outline)}개 섹션)")

    except Exception as e:
        logger.error(f"목차 검사 중 오류 발생: {e}")
        return 1
    return 0


def search_command(args):
    """검색 명령"""
    try:
        outlines = [get_outline(args.outline)] if args.outline else None
        search_system = OutlineSearch(outlines)

        results = search_system.search(
            query=args.query,
            search_type=SearchType(args.search_type),
            limit=(
                args.limit
                if args.limit is not None
                else Config.DEFAULT_SEARCH_LIMIT
            ),
        )
        print(format_search_results(results))

    except Exception as e:
        logger.error(f"검색 중 오류 발생: {e}")
        return 1
    return 0


def stats_command(args):
    """목차 통계 명령"""
    try:
        outline = get_outline(args.name or Config.DEFAULT_OUTLINE)
        print(format_statistics(outline_statistics(outline)))
    except Exception as e:
        logger.error(f"통계 조회 중 오류 발생: {e}")
        return 1
    return 0


def config_command(args):
    """설정 출력 명령"""
    Config.print_config()
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="가이드 문서 목차 카탈로그",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 등록된 목차 목록
  python main.py list

  # Core-JS 목차 출력
  python main.py show core-js

  # JSON 내보내기
  python main.py export jquery -o output/jquery.json

  # 제목 검색
  python main.py search "selectors" --outline jquery
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # list 명령
    subparsers.add_parser("list", help="등록된 목차 목록")

    # show 명령
    show_parser = subparsers.add_parser("show", help="목차 출력")
    show_parser.add_argument("name", nargs="?", help="목차 이름 (기본값: 설정값)")
    show_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="출력 형식 (기본값: text)",
    )

    # export 명령
    export_parser = subparsers.add_parser("export", help="목차 JSON 내보내기")
    export_parser.add_argument("name", nargs="?", help="목차 이름 (기본값: 설정값)")
    export_parser.add_argument("-o", "--output", help="저장할 파일 경로")
    export_parser.add_argument("--indent", type=int, help="JSON 들여쓰기")

    # validate 명령
    validate_parser = subparsers.add_parser("validate", help="목차 JSON 파일 검사")
    validate_parser.add_argument("path", help="검사할 JSON 파일 경로")
    validate_parser.add_argument(
        "--no-groups", action="store_true", help="소절 그룹을 허용하지 않음"
    )

    # search 명령
    search_parser = subparsers.add_parser("search", help="목차 제목 검색")
    search_parser.add_argument("query", help="검색 질의")
    search_parser.add_argument("--outline", help="검색할 목차 (기본값: 전체)")
    search_parser.add_argument(
        "--search-type",
        choices=["keyword", "exact"],
        default="keyword",
        help="검색 타입 (기본값: keyword)",
    )
    search_parser.add_argument("--limit", type=int, help="검색 결과 개수")

    # stats 명령
    stats_parser = subparsers.add_parser("stats", help="목차 통계")
    stats_parser.add_argument("name", nargs="?", help="목차 이름 (기본값: 설정값)")

    # config 명령
    subparsers.add_parser("config", help="현재 설정 출력")

    return parser


COMMANDS = {
    "list": list_command,
    "show": show_command,
    "export": export_command,
    "validate": validate_command,
    "search": search_command,
    "stats": stats_command,
    "config": config_command,
}


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # config 명령은 설정 검사 전에 실행
    if args.command == "config":
        return config_command(args)

    try:
        validate_config(Config())
    except ValueError as e:
        print(f"⚠️ {e}")
        return 1

    # 로깅 설정
    logging.basicConfig(
        level=Config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
