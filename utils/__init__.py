"""Utils package initializer.

Making `utils` an explicit package avoids mypy duplicate-module errors when
running static type checks from the repository root.
"""

__all__: list[str] = [
    "arrays",
    "settings",
    "strings",
    "validate",
]
