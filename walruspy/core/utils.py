import json
import mimetypes
from pathlib import Path
from typing import Union


def combine_urls(base_url: str, path: str) -> str:
    """Joins a base URL and a path with exactly one slash between them."""
    base = base_url[:-1] if base_url.endswith('/') else base_url
    path = path if path.startswith('/') else f"/{path}"
    return f"{base}{path}"


def parse_error_message(status: int, content_type: str, body: bytes) -> str:
    """Extracts a readable message from an HTTP error body."""
    fallback = f"HTTP error {status}"
    if not body:
        return fallback

    if 'application/json' in (content_type or ''):
        try:
            payload = json.loads(body)
        except (ValueError, UnicodeDecodeError):
            return fallback
        if isinstance(payload, dict):
            message = payload.get('error') or payload.get('message')
            if isinstance(message, dict):
                message = message.get('message')
            if message:
                return str(message)
        return fallback

    text = body.decode('utf-8', errors='replace').strip()
    return text or fallback


def guess_content_type(file_path: Union[str, Path]) -> str:
    """Guesses a MIME type from a filename, defaulting to octet-stream."""
    content_type, _ = mimetypes.guess_type(str(file_path))
    return content_type or 'application/octet-stream'
