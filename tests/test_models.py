import pytest

from tinify_shrink import Resize, ShrinkResult, StoreTarget, TransformOptions


def test_shrink_result_from_full_body():
    result = ShrinkResult.from_dict(
        {
            "input": {"size": 207565, "type": "image/jpeg"},
            "output": {
                "size": 189232,
                "type": "image/jpeg",
                "width": 1024,
                "height": 768,
                "ratio": 0.9117,
                "url": "https://api.tinify.com/output/abc",
            },
        }
    )

    assert result.input.type == "image/jpeg"
    assert result.output.height == 768
    assert result.download_url == "https://api.tinify.com/output/abc"
    assert result.error is None
    assert not result.failed


def test_null_ratio_defaults_to_zero():
    result = ShrinkResult.from_dict({"output": {"size": 1, "ratio": None}})

    assert result.output.ratio == 0.0


def test_shrink_result_from_error_body():
    result = ShrinkResult.from_dict(
        {"error": "Unauthorized", "message": "Credentials are invalid"}
    )

    assert result.failed
    assert result.input is None
    assert result.output is None
    assert result.download_url is None


def test_empty_output_url_is_not_downloadable():
    result = ShrinkResult.from_dict({"output": {"size": 1, "url": ""}})

    assert result.download_url is None


def test_resize_rejects_unknown_method():
    with pytest.raises(ValueError):
        Resize(method="stretch", width=10, height=10)


def test_empty_options_payload():
    assert TransformOptions().to_dict() == {}


def test_store_target_defaults_to_s3():
    assert StoreTarget().to_dict() == {"service": "s3"}
