"""
Dataset loading: remote fetch, local file, and payload validation.

The payload must carry `baseTemperature` and `monthlyVariance`; anything else
is rejected before a chart is built, so a render pass never shows a partial
chart.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from heatmap.config import DATASET_URL, FETCH_TIMEOUT
from heatmap.models.dataset import Dataset

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Base class for dataset loading failures."""


class DatasetFetchError(DatasetError):
    """The dataset could not be retrieved."""


class DatasetFormatError(DatasetError, ValueError):
    """The payload is not valid monthly-variance JSON."""


def parse_dataset(payload: Union[dict, str, bytes]) -> Dataset:
    """
    Validate a raw payload into a Dataset.

    Args:
        payload: Decoded JSON object, or JSON text/bytes

    Raises:
        DatasetFormatError: invalid JSON, missing keys, or bad record values
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise DatasetFormatError(f"Dataset is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise DatasetFormatError("Dataset must be a JSON object.")

    missing = [key for key in ("baseTemperature", "monthlyVariance") if key not in payload]
    if missing:
        raise DatasetFormatError(f"Dataset is missing required keys: {', '.join(missing)}")

    try:
        return Dataset.model_validate(payload)
    except ValidationError as e:
        raise DatasetFormatError(f"Invalid dataset: {e.error_count()} validation error(s): {e}") from e


def load_dataset_file(path: Union[str, Path]) -> Dataset:
    """Load a dataset from a local JSON copy."""
    with open(path, "rb") as f:
        return parse_dataset(f.read())


async def fetch_dataset(
    url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> Dataset:
    """
    Fetch and validate the dataset over HTTP.

    Args:
        url: Dataset URL (default: HEATMAP_DATASET_URL)
        client: Existing client to reuse; a short-lived one is created otherwise
        timeout: Request timeout in seconds (default: HEATMAP_FETCH_TIMEOUT)

    Raises:
        DatasetFetchError: network failure, timeout, or non-2xx status
        DatasetFormatError: the response body is not a valid dataset
    """
    url = url or DATASET_URL
    timeout = FETCH_TIMEOUT if timeout is None else timeout

    logger.info("Fetching dataset from %s", url)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Dataset fetch returned HTTP %s: %s", e.response.status_code, url)
        raise DatasetFetchError(
            f"Dataset request failed with status {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        logger.error("Dataset fetch failed for %s: %s", url, e)
        raise DatasetFetchError(f"Could not fetch dataset: {e}") from e

    try:
        dataset = parse_dataset(response.content)
    except DatasetFormatError:
        logger.error("Malformed dataset payload from %s", url)
        raise

    logger.info("Loaded %d monthly records", len(dataset.monthly_variance))
    return dataset
