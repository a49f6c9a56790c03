from typing import Optional

class NumberValidator:
    """Parses integer fields typed at the menu prompts.
    Returns None for anything that is not a plain (optionally signed) integer.
    """

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        if not s:
            return None
        digits = s[1:] if s[0] in "+-" else s
        # int() would also accept "1_000" and non-ASCII digits; keep to 0-9
        if not digits or not all("0" <= ch <= "9" for ch in digits):
            return None
        return int(s)

class TextValidator:
    """Name and prefix checks applied before input reaches the library."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        return not TextValidator.is_blank(name)

    @staticmethod
    def validate_prefix(prefix: Optional[str]) -> bool:
        return not TextValidator.is_blank(prefix)

class ChoiceValidator:
    SORT_BY_ID = "1"
    SORT_BY_NAME = "2"

    @staticmethod
    def parse_sort_choice(raw: Optional[str]) -> Optional[bool]:
        """'1' -> sort by id (True), '2' -> sort by name (False), anything else -> None."""
        choice = (raw or "").strip()
        if choice == ChoiceValidator.SORT_BY_ID:
            return True
        if choice == ChoiceValidator.SORT_BY_NAME:
            return False
        return None
