from typing import Callable, Optional

from hebrew_train.script import is_hebrew_text


class HebrewInput:
    """Buffer for a typed answer. Flags input that is not Hebrew."""

    def __init__(self, max_length: Optional[int] = None, on_submit: Optional[Callable[[str], None]] = None):
        self.max_length = max_length
        self.on_submit = on_submit
        self.value = ""
        self.show_warning = False

    def set_value(self, value: str) -> None:
        if self.max_length:
            value = value[:self.max_length]
        self.value = value
        self.show_warning = bool(value) and not is_hebrew_text(value)

    @property
    def is_valid(self) -> bool:
        return is_hebrew_text(self.value)

    @property
    def is_empty(self) -> bool:
        return not self.value.strip()

    def submit(self) -> Optional[str]:
        """Hand the trimmed value to on_submit. Blank input is not submitted."""
        if self.is_empty:
            return None
        answer = self.value.strip()
        if self.on_submit:
            self.on_submit(answer)
        return answer

    def reset(self) -> None:
        self.value = ""
        self.show_warning = False
