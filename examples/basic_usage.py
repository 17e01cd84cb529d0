#!/usr/bin/env python3
"""
guide_outlines 패키지 기본 사용 예제

이 예제는 guide_outlines를 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

from guide_outlines import (
    Config,
    validate_config,
    OutlineSearch,
    SearchType,
    list_outlines,
    get_outline,
    save_outline,
    read_outline,
    outline_statistics,
    format_outline,
    format_search_results,
    format_statistics,
)


def main():
    """기본 사용 예제"""
    print("📚 guide_outlines 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 설정 로드
    try:
        config = Config()
        validate_config(config)
        print("✅ 설정 로드 완료")
    except ValueError as e:
        print(f"❌ 설정 오류: {e}")
        return

    # 2. 목차 출력
    for name in list_outlines():
        outline = get_outline(name)
        print()
        print(format_outline(outline))
        print(format_statistics(outline_statistics(outline)))

    # 3. JSON 내보내기 후 다시 읽기
    outline = get_outline(config.default_outline)
    path = save_outline(outline, f"{config.output_dir}/{outline.name}.json")
    reloaded = read_outline(path, name=outline.name)
    print(f"\n💾 {path} 저장 후 재로드: {reloaded.to_list() == outline.to_list()}")

    # 4. 검색 시스템 사용
    print("\n🔍 검색 시스템 테스트")
    search_system = OutlineSearch()

    for query in ["event handlers", "Array"]:
        print(f"\n검색어: '{query}'")
        results = search_system.search(query, search_type=SearchType.KEYWORD, limit=5)
        print(format_search_results(results))


if __name__ == "__main__":
    main()
