import regex

_NON_ALNUM = regex.compile(r"[^\p{L}\p{N}]+")
_NON_DIGIT = regex.compile(r"[^0-9]+")


def normalize(text: str) -> str:
    """
    Remove every character that is not a letter or a number, and uppercase
    the result
    """
    return _NON_ALNUM.sub("", text).upper()


def digits_only(text: str) -> str:
    """
    Keep only the ASCII digits in a string
    """
    return _NON_DIGIT.sub("", text)
