"""
Unit tests for the LLM client and suggestion adapter
"""
import pytest
import requests
from unittest.mock import Mock, patch

from resume_analyzer.ai.client import LLMClient
from resume_analyzer.ai.suggestions import AISuggestionAdapter
from resume_analyzer.config import AIConfig
from resume_analyzer.exceptions import AIProviderFailure


def chat_response(content):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"message": {"role": "assistant", "content": content}}
    return response


class TestLLMClient:
    """Transport and error mapping"""

    @pytest.fixture
    def client(self):
        return LLMClient(base_url="http://llm.test/", model="test-model", max_retries=0)

    def test_complete(self, client):
        with patch('resume_analyzer.ai.client.requests.post', return_value=chat_response(" hello ")) as post:
            assert client.complete("prompt", system_prompt="system") == "hello"

        url = post.call_args[0][0]
        payload = post.call_args[1]['json']
        assert url == "http://llm.test/api/chat"
        assert payload['model'] == "test-model"
        assert payload['stream'] is False
        assert [m['role'] for m in payload['messages']] == ['system', 'user']

    def test_empty_reply(self, client):
        with patch('resume_analyzer.ai.client.requests.post', return_value=chat_response("  ")):
            with pytest.raises(AIProviderFailure):
                client.complete("prompt")

    def test_timeout(self, client):
        with patch('resume_analyzer.ai.client.requests.post', side_effect=requests.Timeout()):
            with pytest.raises(AIProviderFailure) as exc_info:
                client.complete("prompt")

        assert "timed out" in exc_info.value.message

    def test_http_error(self, client):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

        with patch('resume_analyzer.ai.client.requests.post', return_value=response) as post:
            with pytest.raises(AIProviderFailure):
                client.complete("prompt")

        assert post.call_count == 1

    def test_retries_connection_errors(self):
        client = LLMClient(base_url="http://llm.test", max_retries=1)
        side_effect = [requests.ConnectionError("refused"), chat_response("ok")]

        with patch('resume_analyzer.ai.client.requests.post', side_effect=side_effect) as post:
            assert client.complete("prompt") == "ok"

        assert post.call_count == 2

    def test_from_config(self):
        config = AIConfig(base_url="http://example:1234", model="mistral", timeout_seconds=3.0)
        client = LLMClient.from_config(config)

        assert client.base_url == "http://example:1234"
        assert client.model == "mistral"
        assert client.timeout == 3.0

    def test_is_available(self, client):
        with patch('resume_analyzer.ai.client.requests.get', side_effect=requests.ConnectionError()):
            assert client.is_available() is False


class TestAISuggestionAdapter:
    """Reply parsing and fallbacks"""

    @pytest.fixture
    def adapter(self):
        return AISuggestionAdapter(config=AIConfig(max_suggestions=3))

    def test_no_provider(self, adapter):
        with pytest.raises(AIProviderFailure):
            adapter.generate_suggestions("resume text")

    def test_parse_numbered_lines(self, adapter):
        reply = "Here you go:\n1. Add metrics\n2) Use action verbs\n- Fix the layout\n4. Extra\nScore: 70"
        texts = [s.text for s in adapter.parse_suggestions(reply)]

        assert texts == ["Add metrics", "Use action verbs", "Fix the layout"]

    def test_preamble_skipped(self, adapter):
        reply = "Here are 3 suggestions:\n\n1. Rewrite the summary:\nLead with your strongest result"
        texts = [s.text for s in adapter.parse_suggestions(reply)]

        assert texts == ["Rewrite the summary:", "Lead with your strongest result"]

    def test_parse_json_array(self, adapter):
        reply = 'Sure! ["Add metrics", {"text": "Tailor keywords to the job description"}, ""]'
        suggestions = adapter.parse_suggestions(reply)

        assert [s.text for s in suggestions] == ["Add metrics", "Tailor keywords to the job description"]
        assert suggestions[1].category == "keywords"

    def test_parse_json_object(self, adapter):
        reply = '{"suggestions": ["1. Shorten the summary"], "score": 75}'

        assert [s.text for s in adapter.parse_suggestions(reply)] == ["Shorten the summary"]

    @pytest.mark.parametrize("reply,expected", [
        ("Score: 82", 82),
        ("overall score = 150", 100),
        ("no rating here", None),
        ("", None),
    ])
    def test_extract_score(self, adapter, reply, expected):
        assert adapter.extract_score(reply) == expected

    @pytest.mark.parametrize("text,category", [
        ("Quantify results with percentages", "achievements"),
        ("Start bullets with an action verb", "action_verbs"),
        ("Use a simpler layout", "formatting"),
        ("Rewrite your summary", "summary"),
        ("Be more confident", "general"),
    ])
    def test_categorize(self, adapter, text, category):
        assert adapter.categorize(text) == category

    def test_empty_reply_fails(self):
        provider = Mock()
        provider.complete.return_value = "   "
        adapter = AISuggestionAdapter(provider)

        with pytest.raises(AIProviderFailure):
            adapter.generate_suggestions("resume text")

    def test_heuristic_score_without_reply_score(self, resume_text):
        provider = Mock()
        provider.name = "mock"
        provider.complete.return_value = "1. Add metrics"
        adapter = AISuggestionAdapter(provider)

        result = adapter.generate_suggestions(resume_text)

        assert result.ai_score == adapter.heuristic_score(resume_text)
        assert result.provider == "mock"

    def test_unnamed_provider(self):
        provider = Mock(spec=['complete'])
        provider.complete.return_value = "1. Add metrics"

        assert AISuggestionAdapter(provider).generate_suggestions("resume").provider == "llm"

    def test_heuristic_bounds(self, adapter, resume_text, job_text):
        assert adapter.heuristic_score("x") == 50
        assert 20 <= adapter.heuristic_score(resume_text, job_text) <= 100

    def test_heuristic_rules(self, adapter):
        text = "jane@example.com (555) 123-4567\nSummary\nIncreased revenue by 30%\nSkills\nEducation"

        # 50 + contact 10 + summary 10 + one metric 3 + skills 10 + education 5
        assert adapter.heuristic_score(text) == 88

    def test_prompt_mentions_weakest_areas(self, adapter):
        prompt = adapter.build_prompt("resume", "job", {'grammar': 90, 'keyword': 40, 'length': 55, 'section': 60})

        assert "keyword 40/100, length 55/100, section 60/100" in prompt
        assert "Job Description:" in prompt
