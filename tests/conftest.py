"""Pytest fixtures for client tests."""

from unittest.mock import MagicMock, patch

import pytest

from tinify_shrink import ShrinkResult, TinifyClient


def make_response(status_code=200, json_data=None, content=b""):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode("utf-8", errors="replace")
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def client():
    return TinifyClient("abc", base_url="https://api.test")


@pytest.fixture
def mock_post(client):
    with patch.object(client.session, "post") as mock:
        yield mock


@pytest.fixture
def mock_get():
    """Patch the plain download GET; set `.download` to the response object."""
    with patch("tinify_shrink.client.requests.get") as mock:
        download = MagicMock()
        download.iter_content.return_value = [b"shrunk-", b"bytes"]
        mock.return_value.__enter__.return_value = download
        mock.download = download
        yield mock


@pytest.fixture
def source_image(tmp_path):
    path = tmp_path / "in.jpg"
    path.write_bytes(b"\xff\xd8original-jpeg-bytes")
    return path


@pytest.fixture
def shrunk():
    return ShrinkResult.from_dict(
        {
            "input": {"size": 2000, "type": "image/jpeg"},
            "output": {
                "size": 100,
                "type": "image/jpeg",
                "width": 640,
                "height": 480,
                "ratio": 0.05,
                "url": "https://x/out",
            },
        }
    )
