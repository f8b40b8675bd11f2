__all__ = ('text_length',)


def text_length(text: str) -> int:
    # ? counts code points, not encoded bytes; 'é' and '🦊' are both 1
    return len(text)
