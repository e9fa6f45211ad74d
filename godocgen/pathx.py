"""Extensions to slash-separated path handling."""


def descends(a: str, b: str) -> bool:
    """Report whether ``b`` is equal to, or a descendant of, ``a``."""
    if a.endswith("/"):
        a = a[:-1]
    if not b.startswith(a):
        return False
    rest = b[len(a):]
    return rest == "" or rest[0] == "/"