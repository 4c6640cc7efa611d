from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.attendify.attendify.core.exceptions import SummarizerMalformed, SummarizerUnavailable
from src.attendify.attendify.reports.summarizer.litellm_summarizer import LiteLLMSummarizer, strip_code_fences

REQUEST = {
    "totalRecords": 4,
    "presentCount": 2,
    "absentCount": 1,
    "lateCount": 1,
    "tenantType": "WORKPLACE",
    "period": "Last Week",
}


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_sends_prompt_with_counts_and_parses_json():
    calls = []

    def fake_completion(**kwargs):
        calls.append(kwargs)
        return _response('{"summary": "ok", "risks": [], "actions": [], "confidenceScore": 0.9}')

    summarizer = LiteLLMSummarizer(model="gemini/gemini-2.5-flash", api_key="k", timeout=5, completion=fake_completion)

    raw = summarizer.summarize(REQUEST)

    assert raw["summary"] == "ok"
    kwargs = calls[0]
    assert kwargs["model"] == "gemini/gemini-2.5-flash"
    assert kwargs["api_key"] == "k"
    assert kwargs["timeout"] == 5
    assert "WORKPLACE attendance system" in kwargs["messages"][1]["content"]
    assert '"presentCount": 2' in kwargs["messages"][1]["content"]


def test_fenced_json_is_accepted():
    fenced = '```json\n{"summary": "ok"}\n```'
    summarizer = LiteLLMSummarizer(model="m", completion=lambda **_: _response(fenced))

    assert summarizer.summarize(REQUEST) == {"summary": "ok"}
    assert strip_code_fences(fenced) == '{"summary": "ok"}'


def test_transport_errors_become_unavailable():
    def broken(**_):
        raise ConnectionError("no route to host")

    with pytest.raises(SummarizerUnavailable):
        LiteLLMSummarizer(model="m", completion=broken).summarize(REQUEST)


@pytest.mark.parametrize("content", ["", None, "definitely not json"])
def test_bad_content_is_malformed(content):
    summarizer = LiteLLMSummarizer(model="m", completion=lambda **_: _response(content))

    with pytest.raises(SummarizerMalformed):
        summarizer.summarize(REQUEST)
