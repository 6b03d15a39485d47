"""
Tinify Python client

Simple client library for the Tinify (TinyPNG) image compression API.

Usage:
    from tinify_shrink import TinifyClient, StoreTarget

    # Initialize client
    client = TinifyClient(api_key="your_api_key")

    # Upload and compress, saving the result locally
    result = client.shrink("photo.png", "photo.min.png")
    if result.failed:
        print(result.error, result.message)

    # Resize the uploaded image
    client.cover(result, 200, 200, "cover.png")
    client.fit(result, 800, 600, "fit.png")
    thumb_bytes = client.scale(result, width=150)

    # Let the service push the result to S3 as well
    store = StoreTarget(
        aws_access_key_id="AKIA...",
        aws_secret_access_key="...",
        region="us-west-1",
        path="my-bucket/photo.png",
    )
    client.shrink("photo.png", "photo.min.png", store=store)
"""

from .client import (
    TinifyClient,
    TinifyError,
    TinifyAuthError,
    TinifyQuotaError,
    TinifyTransformError,
)
from .models import (
    ShrinkResult,
    ShrinkInput,
    ShrinkOutput,
    TransformOptions,
    Resize,
    StoreTarget,
)

__version__ = "0.1.0"

__all__ = [
    "TinifyClient",
    "TinifyError",
    "TinifyAuthError",
    "TinifyQuotaError",
    "TinifyTransformError",
    "ShrinkResult",
    "ShrinkInput",
    "ShrinkOutput",
    "TransformOptions",
    "Resize",
    "StoreTarget",
]
