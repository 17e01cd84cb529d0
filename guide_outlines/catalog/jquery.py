# jQuery 가이드 목차 정의

JQUERY_OUTLINE = [
    {
        "section": "Introduction to jQuery",
        "subsections": [
            "What is jQuery?",
            "Why use jQuery?",
            "Setting up jQuery: Downloading and including",
            "Basic Syntax and Selectors",
            "jQuery Object and DOM Manipulation",
        ],
    },
    {
        "section": "Selectors",
        "subsections": [
            "Basic Selectors (e.g., `#id`, `.class`, `element`)",
            "Hierarchy Selectors (e.g., `>` , `+`, `~`, `ancestor descendant`)",
            "Filtering Selectors (e.g., `:first`, `:last`, `:even`, `:odd`, `:eq`, `:gt`, `:lt`)",
            "Form Selectors (e.g., `:input`, `:checkbox`, `:radio`, `:text`)",
            "Attribute Selectors (e.g., `[attribute]`, `[attribute=value]`, `[attribute^=value]`)",
            "Combining Selectors",
        ],
    },
    {
        "section": "DOM Manipulation",
        "subsections": [
            "Traversing the DOM (`parent()`, `children()`, `siblings()`, `find()`, `next()`, `prev()`, etc.)",
            "Adding, Removing, and Replacing Elements (`append()`, `prepend()`, `after()`, `before()`, `remove()`, `replaceWith()`, `empty()`)",
            "Modifying Element Content (`text()`, `html()`, `val()`, `attr()`, `removeAttr()`)",
            "Working with Classes (`addClass()`, `removeClass()`, `toggleClass()`, `hasClass()`)",
            "Cloning and Wrapping Elements (`clone()`, `wrap()`, `unwrap()`)",
        ],
    },
    {
        "section": "Event Handling",
        "subsections": [
            "Attaching Event Handlers (`on()`, `click()`, `hover()`, `focus()`, `blur()`, etc.)",
            "Event Object Properties",
            "Event Delegation",
            "Event Namespaces",
            "Detaching Event Handlers (`off()`)",
            "Custom Events",
        ],
    },
    {
        "section": "Effects",
        "subsections": [
            "Show/Hide Effects (`show()`, `hide()`, `toggle()`)",
            "Fade Effects (`fadeIn()`, `fadeOut()`, `fadeToggle()`, `fadeTo()`)",
            "Slide Effects (`slideDown()`, `slideUp()`, `slideToggle()`)",
            "Animate Method (`animate()`)",
            "Custom Animations",
            "Stopping Animations (`stop()`)",
        ],
    },
    {
        "section": "AJAX",
        "subsections": [
            "Making AJAX Requests (`$.ajax()`, `$.get()`, `$.post()`)",
            "Handling AJAX Success and Error",
            "JSON Data Handling",
            "AJAX Callbacks",
            "Asynchronous vs. Synchronous Calls",
        ],
    },
    {
        "section": "Utilities",
        "subsections": [
            "Data Methods (`data()`, `removeData()`)",
            "Extend Method (`$.extend()`)",
            "Each Method (`$.each()`)",
            "Map Method (`$.map()`)",
            "grep Method (`$.grep()`)",
            "Utility Functions (e.g., `$.trim()`, `$.isArray()`)",
        ],
    },
    {
        "section": "Advanced Topics",
        "subsections": [
            "jQuery Plugins",
            "jQuery UI",
            "Debugging jQuery Code",
            "Performance Optimization",
            "Working with different browsers and versions",
        ],
    },
    {
        "section": "Appendix",
        "subsections": [
            "Glossary of Terms",
            "Quick Reference Guide",
            "Further Resources",
        ],
    },
]
