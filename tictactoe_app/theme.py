from enum import Enum


class Theme(Enum):
    """
    light/dark preference, lives for the session only
    """
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, text):
        # accepts 'light' / 'dark' in any case
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise ValueError(f"unknown theme {text!r}, expected 'light' or 'dark'") from None

    def toggled(self):
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @property
    def button_label(self):
        # names the theme a click switches to
        return "🌙 Dark" if self is Theme.LIGHT else "☀️ Light"

    @property
    def accessible_name(self):
        return f"Switch to {self.toggled().value} mode"
