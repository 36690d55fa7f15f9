from .localized_text import LocalizedText

__all__ = ["LocalizedText"]
