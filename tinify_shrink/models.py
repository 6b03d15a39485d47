"""
Data records exchanged with the Tinify API.

ShrinkResult mirrors the JSON body returned by the shrink endpoint.
TransformOptions, Resize and StoreTarget build the JSON payload posted
to a result's output URL.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


RESIZE_METHODS = ("cover", "fit", "scale")


@dataclass
class ShrinkInput:
    """Size and mime type of the uploaded original."""

    size: int = 0
    type: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShrinkInput":
        return cls(size=data.get("size", 0), type=data.get("type", ""))


@dataclass
class ShrinkOutput:
    """Compressed image hosted by the service."""

    size: int = 0
    type: str = ""
    width: int = 0
    height: int = 0
    ratio: float = 0.0
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShrinkOutput":
        return cls(
            size=data.get("size", 0),
            type=data.get("type", ""),
            width=data.get("width", 0),
            height=data.get("height", 0),
            ratio=float(data.get("ratio") or 0.0),
            url=data.get("url") or "",
        )


@dataclass
class ShrinkResult:
    """
    Result of a shrink upload.

    `error` and `message` are only populated when the service reports a
    failure (unsupported file type, exceeded quota, bad credentials...).
    They are never raised; check `failed` before using `output`.
    """

    input: Optional[ShrinkInput] = None
    output: Optional[ShrinkOutput] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShrinkResult":
        input_data = data.get("input")
        output_data = data.get("output")
        return cls(
            input=ShrinkInput.from_dict(input_data) if input_data else None,
            output=ShrinkOutput.from_dict(output_data) if output_data else None,
            error=data.get("error"),
            message=data.get("message"),
        )

    @property
    def failed(self) -> bool:
        return bool(self.error)

    @property
    def download_url(self) -> Optional[str]:
        """Hosted output URL, or None when the service returned none."""
        if self.output is None or not self.output.url:
            return None
        return self.output.url


@dataclass
class StoreTarget:
    """
    Amazon S3 destination the service pushes a result to.

    Passed through to the API as-is; nothing here is validated.
    """

    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    region: Optional[str] = None
    path: Optional[str] = None
    service: str = "s3"

    def to_dict(self) -> Dict[str, Any]:
        payload = {"service": self.service}
        for key in ("aws_access_key_id", "aws_secret_access_key", "region", "path"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


@dataclass
class Resize:
    method: str
    width: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self):
        if self.method not in RESIZE_METHODS:
            raise ValueError(f"Unknown resize method: {self.method}")

    def to_dict(self) -> Dict[str, Any]:
        payload = {"method": self.method}
        # Unset dimensions (None or 0) are left for the service to derive
        if self.width:
            payload["width"] = self.width
        if self.height:
            payload["height"] = self.height
        return payload


@dataclass
class TransformOptions:
    """Payload for a post-shrink call on a result's output URL."""

    resize: Optional[Resize] = None
    store: Optional[StoreTarget] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {}
        if self.resize is not None:
            payload["resize"] = self.resize.to_dict()
        if self.store is not None:
            payload["store"] = self.store.to_dict()
        return payload
