from typing import Iterable, Optional


def compose(fragments: Iterable[Optional[str]]) -> str:
    """
    Join URL fragments with exactly one slash between non-empty fragments.

    None and empty fragments contribute nothing. The content of each
    fragment is kept as is, path parameters like ``{id}`` included.

    Examples:
        >>> compose(["a", "", "b"])
        'a/b'
        >>> compose(["a/", "/b"])
        'a/b'
        >>> compose([None, "/x"])
        '/x'
        >>> compose(["http://localhost:8080", "/api", "/widgets", "/{id}"])
        'http://localhost:8080/api/widgets/{id}'
    """
    url = ""
    for path in fragments:
        if not path:
            continue
        if url and path[0] == "/":
            path = path[1:]
        if url and url[-1] != "/":
            url += "/"
        url += path
    return url


def build_url(*paths: Optional[str]) -> str:
    return compose(paths)
