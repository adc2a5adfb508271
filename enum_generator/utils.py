"""Utility functions for loading class descriptors.

A class descriptor is a JSON object describing one enum-like class: its
name, fields and existing members. Descriptors can be loaded from local
files or URLs.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class DescriptorLoadError(Exception):
    """Custom exception for descriptor loading errors."""

    pass


def _check_descriptor(data: Any, source: str) -> dict:
    if not isinstance(data, dict):
        logger.error("Descriptor from %s is not a JSON object", source)
        raise DescriptorLoadError(f"Descriptor must be a JSON object: {source}")
    if not data.get("name"):
        logger.error("Descriptor from %s has no class name", source)
        raise DescriptorLoadError(f"Descriptor has no 'name': {source}")
    return data


def load_descriptor_from_file(file_path: str | Path) -> tuple[str, dict]:
    """Load a class descriptor from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, descriptor dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        DescriptorLoadError: If file cannot be read or is not a valid descriptor.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load descriptor from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise DescriptorLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise DescriptorLoadError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded descriptor from %s", file_path)
    return str(file_path), _check_descriptor(data, str(file_path))


def load_descriptor_from_url(url: str, timeout: int = 30) -> tuple[str, dict]:
    """Load a class descriptor from a URL.

    Args:
        url: URL to fetch the descriptor from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, descriptor dict).

    Raises:
        DescriptorLoadError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load descriptor from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise DescriptorLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise DescriptorLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise DescriptorLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise DescriptorLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise DescriptorLoadError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise DescriptorLoadError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded descriptor from %s", url)
    return url, _check_descriptor(data, url)


def load_descriptor(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, dict]:
    """Load a class descriptor from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch the descriptor from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, descriptor dict).

    Raises:
        DescriptorLoadError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise DescriptorLoadError("Either file_path or url must be provided")

    if file_path and url:
        raise DescriptorLoadError("Cannot specify both file_path and url")

    if file_path:
        return load_descriptor_from_file(file_path)
    return load_descriptor_from_url(url, timeout)


def save_descriptor(descriptor: dict, file_path: str | Path) -> None:
    """Write a class descriptor as JSON."""
    file_path = Path(file_path)
    try:
        with file_path.open("w", encoding="utf-8") as f:
            json.dump(descriptor, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        logger.error("Error writing descriptor %s: %s", file_path, e)
        raise DescriptorLoadError(f"Error writing descriptor {file_path}: {e}") from e
    logger.info("Saved descriptor to %s", file_path)
