"""Load the Swagger document from a server or a local file.

Both JSON and YAML are accepted; YAML being a superset of JSON, every
document goes through ``yaml.safe_load``.
"""

from pathlib import Path

import httpx
import yaml

from api_extractor.exceptions import FetchError

TIMEOUT = 30.0


def fetch_document(url: str) -> dict:
    """Fetch and parse the API document served at ``url``.

    Only http and https URLs are accepted.
    """
    if not url.startswith(("http://", "https://")):
        raise FetchError(
            f"Only http(s) URLs can be fetched, got {url!r}. "
            "Check the --source argument or serverAddress in the configuration file."
        )

    try:
        response = httpx.get(url, timeout=TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"Failed to fetch {url}: HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    return _parse(response.text, url)


def read_document(file_path: Path) -> dict:
    """Read and parse an API document from a local JSON or YAML file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise FetchError(f"Failed to read {file_path}: {e}") from e
    return _parse(text, str(file_path))


def load_document(source: str) -> dict:
    """Load from a URL when ``source`` has a scheme, otherwise from a file."""
    if "://" in source:
        return fetch_document(source)
    return read_document(Path(source))


def _parse(text: str, origin: str) -> dict:
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FetchError(f"Failed to parse the document from {origin}: {e}") from e
    if not isinstance(doc, dict):
        raise FetchError(f"The document from {origin} is not a JSON/YAML object")
    return doc
