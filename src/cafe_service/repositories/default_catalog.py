"""Built-in cafe catalog used when no catalog file is configured."""

DEFAULT_CATALOG: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
    ],
}
