"""Shortened bridge token for display and logs."""


def preview_token(token: str) -> str:
    """First 10 and last 6 characters of tokens longer than 16."""
    if len(token) <= 16:
        return token
    return f"{token[:10]}...{token[-6:]}"
