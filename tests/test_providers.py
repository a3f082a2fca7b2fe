from pathlib import Path
import json
import sys

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.errors import (
    ConfigurationError,
    EmptyResponseError,
    UnparseableResponseError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from core.providers import GeminiProvider, extract_text


def make_provider(handler, **kwargs):
    return GeminiProvider(api_key="test-key", transport=httpx.MockTransport(handler), **kwargs)


def gemini_reply(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def test_missing_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        GeminiProvider(api_key="")
    with pytest.raises(ConfigurationError):
        GeminiProvider(api_key=None)


def test_request_shape_and_key_header():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json=gemini_reply("Roses are red"))

    provider = make_provider(handler, model="gemini-2.5-flash")
    assert provider.generate("write a poem") == "Roses are red"

    request = captured["request"]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert "test-key" not in str(request.url)
    assert request.headers["x-goog-api-key"] == "test-key"

    payload = json.loads(request.content)
    assert payload["contents"] == [{"role": "user", "parts": [{"text": "write a poem"}]}]
    assert payload["generationConfig"] == {"temperature": 0.8, "maxOutputTokens": 512}


def test_non_2xx_raises_status_error_with_body():
    def handler(request):
        return httpx.Response(429, json={"error": {"message": "quota"}})

    with pytest.raises(UpstreamStatusError) as info:
        make_provider(handler).generate("hi")
    assert info.value.upstream_status == 429
    assert info.value.body == {"error": {"message": "quota"}}
    assert info.value.kind == "status"


def test_timeout_raises_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(UpstreamTimeoutError):
        make_provider(handler, timeout=0.5).generate("hi")


def test_connection_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamTransportError):
        make_provider(handler).generate("hi")


def test_non_json_body_is_unparseable():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(UnparseableResponseError):
        make_provider(handler).generate("hi")


def test_blank_candidate_text_is_empty():
    def handler(request):
        return httpx.Response(200, json=gemini_reply("   "))

    with pytest.raises(EmptyResponseError):
        make_provider(handler).generate("hi")


# --- extractor shapes ---


def test_extract_joins_parts_and_candidates():
    data = {
        "candidates": [
            {"content": {"parts": [{"text": "line one, "}, {"text": "line two"}]}},
            {"content": {"parts": [{"text": "second candidate"}]}},
        ]
    }
    assert extract_text(data) == "line one, line two\n\nsecond candidate"


def test_extract_content_block_list():
    data = {"candidates": [{"content": [{"parts": [{"text": "block "}, {"text": "text"}]}]}]}
    assert extract_text(data) == "block text"


def test_extract_candidate_text_fields():
    assert extract_text({"candidates": [{"content": [{"text": "first block"}]}]}) == "first block"
    assert extract_text({"candidates": [{"text": "flat candidate"}]}) == "flat candidate"


def test_extract_output_array():
    data = {"output": [{"content": [{"parts": [{"text": "from output"}]}]}]}
    assert extract_text(data) == "from output"


def test_extract_top_level_fields():
    assert extract_text({"generatedText": "generated"}) == "generated"
    assert extract_text({"text": "plain"}) == "plain"


def test_extract_prefers_candidates_over_top_level_text():
    data = {**gemini_reply("from candidates"), "text": "from top level"}
    assert extract_text(data) == "from candidates"


def test_extract_placeholder_is_empty():
    with pytest.raises(EmptyResponseError):
        extract_text({"text": "No response received."})


def test_extract_blocked_candidates_are_empty():
    with pytest.raises(EmptyResponseError):
        extract_text({"candidates": [{"finishReason": "SAFETY"}]})


@pytest.mark.parametrize("data", [{}, {"usage": 3}, [], "text", None])
def test_extract_unknown_shape_is_unparseable(data):
    with pytest.raises(UnparseableResponseError):
        extract_text(data)


@pytest.mark.parametrize(
    "data",
    [
        {"candidates": [{"content": {"parts": [{"text": 123}]}}]},
        {"candidates": [{"content": [{"text": {"x": 1}}]}]},
        {"candidates": [{"content": [{"parts": [{"text": None}]}], "text": ["a"]}]},
        {"output": [{"content": [{"parts": [{"text": 4.5}]}]}]},
        {"generatedText": 7},
    ],
)
def test_extract_non_string_text_is_an_upstream_error(data):
    with pytest.raises((EmptyResponseError, UnparseableResponseError)):
        extract_text(data)


def test_extract_skips_non_string_parts_but_keeps_the_rest():
    data = {"candidates": [{"content": {"parts": [{"text": 1}, {"text": "kept"}]}}]}
    assert extract_text(data) == "kept"
