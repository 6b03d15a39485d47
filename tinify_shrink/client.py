"""
Tinify client implementation.

This module contains the TinifyClient class and related exceptions.
For usage examples, see the package docstring: help(tinify_shrink)
"""

import base64
import logging
import requests
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .models import Resize, ShrinkResult, StoreTarget, TransformOptions

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class TinifyError(Exception):
    """Base exception for Tinify client errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        api_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.api_message = api_message


class TinifyAuthError(TinifyError):
    """Authentication/authorization error."""

    pass


class TinifyQuotaError(TinifyError):
    """Monthly compression limit reached."""

    pass


class TinifyTransformError(TinifyError):
    """Resize or store call rejected by the service."""

    pass


class TinifyClient:
    """
    Tinify API client for shrinking and resizing images.

    Args:
        api_key: Your API key (from the developer dashboard)
        base_url: Base URL of the Tinify API (default: https://api.tinify.com)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.tinify.com",
        timeout: int = 30,
    ):
        self._encoded_key = base64.b64encode(api_key.encode("utf-8")).decode("ascii")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Authorization": f"Basic {self._encoded_key}"})

    @property
    def encoded_key(self) -> str:
        return self._encoded_key

    def _request(
        self,
        url: Optional[str] = None,
        data: Optional[bytes] = None,
        options: Optional[TransformOptions] = None,
    ) -> requests.Response:
        """Make an authenticated POST, defaulting to the shrink endpoint."""
        if url is None:
            url = f"{self.base_url}/shrink"

        kwargs = {}
        if data is not None:
            kwargs["data"] = data
        if options is not None:
            kwargs["json"] = options.to_dict()

        logger.debug("POST %s", url)
        return self.session.post(url, timeout=self.timeout, **kwargs)

    def _handle_errors(self, response: requests.Response):
        """Handle HTTP errors on transform calls."""
        if response.status_code < 400:
            return

        try:
            error_data = response.json()
            error = error_data.get("error")
            api_message = error_data.get("message", response.text)
        except ValueError:
            error = None
            api_message = response.text

        detail = f"{error}: {api_message}" if error else api_message
        if response.status_code == 401:
            exc_class = TinifyAuthError
            text = f"Authentication failed: {detail}"
        elif response.status_code == 429:
            exc_class = TinifyQuotaError
            text = f"Quota exceeded: {detail}"
        else:
            exc_class = TinifyTransformError
            text = f"API error ({response.status_code}): {detail}"
        raise exc_class(
            text,
            status_code=response.status_code,
            error=error,
            api_message=api_message,
        )

    def _read_input(self, input_file: Union[str, Path, BinaryIO]) -> bytes:
        if isinstance(input_file, (str, Path)):
            with open(input_file, "rb") as f:
                return f.read()
        return input_file.read()

    def _download(self, url: str, output_file: Union[str, Path]):
        """Stream a hosted result to disk with a plain GET."""
        logger.debug("GET %s -> %s", url, output_file)
        with requests.get(url, timeout=self.timeout, stream=True) as response:
            response.raise_for_status()
            with open(output_file, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)

    def shrink(
        self,
        input_file: Union[str, Path, BinaryIO],
        output_file: Optional[Union[str, Path]] = None,
        store: Optional[StoreTarget] = None,
    ) -> ShrinkResult:
        """
        Upload an image and let the service compress it.

        Args:
            input_file: Path to image file or file-like object
            output_file: Where to save the compressed image (optional)
            store: S3 destination the service should also push to (optional)

        Returns:
            ShrinkResult describing the input and the hosted output

        Service-side failures are not raised: they come back in
        `result.error` and `result.message`, and nothing is downloaded.
        Connection problems raise the underlying requests exception.

        Example:
            >>> client = TinifyClient("your_key")
            >>> result = client.shrink("photo.png", "photo.min.png")
            >>> if not result.failed:
            ...     print(result.output.size, result.output.ratio)
        """
        file_data = self._read_input(input_file)
        response = self._request(data=file_data)
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {response.url}, got {data!r}")
        result = ShrinkResult.from_dict(data)

        if result.failed:
            logger.warning("Shrink failed: %s (%s)", result.error, result.message)
            return result

        if output_file is None or result.download_url is None:
            return result

        if store is not None:
            self._execute_option(result, store=store)

        self._download(result.download_url, output_file)
        return result

    def _execute_option(
        self,
        result: ShrinkResult,
        width: Optional[int] = None,
        height: Optional[int] = None,
        method: Optional[str] = None,
        output_file: Optional[Union[str, Path]] = None,
        store: Optional[StoreTarget] = None,
    ) -> bytes:
        """Run resize and/or store options against a shrunk image."""
        url = result.download_url
        if url is None:
            raise TinifyError("Result has no output URL to transform")

        options = TransformOptions(store=store)
        if method is not None:
            options.resize = Resize(method=method, width=width, height=height)

        response = self._request(url=url, options=options)
        self._handle_errors(response)
        content = response.content

        if output_file is not None:
            logger.debug("Writing %d bytes to %s", len(content), output_file)
            with open(output_file, "wb") as f:
                f.write(content)

        return content

    def cover(
        self,
        result: ShrinkResult,
        width: int,
        height: int,
        output_file: Optional[Union[str, Path]] = None,
        store: Optional[StoreTarget] = None,
    ) -> bytes:
        """
        Scale proportionally and crop so the image is exactly width x height.

        Both width and height are required.
        """
        return self._execute_option(result, width, height, "cover", output_file, store)

    def fit(
        self,
        result: ShrinkResult,
        width: int,
        height: int,
        output_file: Optional[Union[str, Path]] = None,
        store: Optional[StoreTarget] = None,
    ) -> bytes:
        """Scale down proportionally to fit within width x height."""
        return self._execute_option(result, width, height, "fit", output_file, store)

    def scale(
        self,
        result: ShrinkResult,
        width: Optional[int] = None,
        height: Optional[int] = None,
        output_file: Optional[Union[str, Path]] = None,
        store: Optional[StoreTarget] = None,
    ) -> bytes:
        """
        Scale down proportionally.

        Give either a target width or a target height, not both.

        Example:
            >>> data = client.scale(result, width=300, output_file="small.png")
        """
        return self._execute_option(result, width, height, "scale", output_file, store)
