# Core-JS 가이드 목차 정의
# "Modules and APIs" 섹션의 소절은 모듈별 멤버 목록을 가진 그룹이다.

CORE_JS_OUTLINE = [
    {
        "section": "Introduction",
        "subsections": [
            "Purpose and Scope of Core-JS",
            "Target Audience",
            "Prerequisites",
            "Installation and Setup",
            "Versioning and Compatibility",
            "Contributing to Core-JS",
        ],
    },
    {
        "section": "Core Concepts",
        "subsections": [
            "Polyfills vs. Native Features",
            "Understanding Transpilation and Polyfilling",
            "Feature Detection and Feature Flags",
            "Browser Compatibility Tables",
            "Error Handling and Fallbacks",
        ],
    },
    {
        "section": "Modules and APIs",
        "subsections": [
            {
                "subsection": "Array",
                "subsubSections": [
                    "forEach", "map", "filter", "reduce", "some", "every", "find",
                    "findIndex", "includes", "indexOf", "lastIndexOf", "copyWithin",
                    "fill", "flat", "flatMap", "reverse", "sort", "splice", "slice",
                    "concat", "join", "pop", "push", "shift", "unshift", "entries",
                    "keys", "values", "isArray",
                ],
            },
            {
                "subsection": "String",
                "subsubSections": [
                    "includes", "startsWith", "endsWith", "repeat", "padStart",
                    "padEnd", "trimStart", "trimEnd", "codePointAt", "fromCodePoint",
                    "normalize",
                ],
            },
            {
                "subsection": "Object",
                "subsubSections": [
                    "assign", "create", "defineProperties", "defineProperty",
                    "entries", "freeze", "getOwnPropertyDescriptor",
                    "getOwnPropertyDescriptors", "getOwnPropertyNames",
                    "getPrototypeOf", "is", "isExtensible", "isFrozen",
                    "isPrototypeOf", "isSealed", "keys", "preventExtensions", "seal",
                    "setPrototypeOf", "values",
                ],
            },
            {
                "subsection": "Number",
                "subsubSections": ["isNaN", "isFinite", "parseInt", "parseFloat"],
            },
            {"subsection": "Date", "subsubSections": []},
            {"subsection": "Map", "subsubSections": []},
            {"subsection": "Set", "subsubSections": []},
            {"subsection": "Promise", "subsubSections": []},
            {"subsection": "Symbol", "subsubSections": []},
            {"subsection": "WeakMap", "subsubSections": []},
            {"subsection": "WeakSet", "subsubSections": []},
            {"subsection": "Reflect", "subsubSections": []},
            {"subsection": "Proxy", "subsubSections": []},
            {"subsection": "Other Modules (Intl, etc.)", "subsubSections": []},
        ],
    },
    {
        "section": "Advanced Usage",
        "subsections": [
            "Customizing Core-JS",
            "Using Core-JS with Different Build Systems (Webpack, Parcel, Rollup, etc.)",
            "Debugging and Troubleshooting",
            "Performance Optimization",
            "Testing with Core-JS",
        ],
    },
    {
        "section": "Appendix",
        "subsections": [
            "Glossary of Terms",
            "Browser Compatibility Chart (Comprehensive)",
            "Changelog",
            "License Information",
        ],
    },
]
