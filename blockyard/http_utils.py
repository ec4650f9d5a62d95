"""Helpers for building plain HTTP requests."""


def get_req(path: str) -> str:
    """A minimal HTTP/1.1 GET request for path on localhost that closes after use."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        "Host: localhost\r\n"
        "Connection: close\r\n"
        "\r\n"
    )